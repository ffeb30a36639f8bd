"""Gateway: untracked Python module override — implements OverrideHook port."""

from __future__ import annotations

import importlib
import logging
from collections.abc import MutableMapping

from local_config.l1_entities.config_value import ConfigValue
from local_config.l1_entities.errors import OverrideLoadError

log = logging.getLogger('lcfg.override')


class ModuleOverrideHook:
    """Delegates to ``populate(entries)`` in an optional, untracked module.

    A module that is simply not installed is not an error: nothing is
    populated. A module that is present but broken is.
    """

    def __init__(self, module_name: str) -> None:
        self.module_name = module_name

    def populate(self, entries: MutableMapping[str, ConfigValue]) -> None:
        try:
            module = importlib.import_module(self.module_name)
        except ModuleNotFoundError as e:
            if not self._is_missing(e.name):
                raise OverrideLoadError(f"Override module '{self.module_name}' failed to import: {e}") from e
            log.debug("Override module '%s' not found; skipping", self.module_name)
            return
        except Exception as e:
            raise OverrideLoadError(f"Override module '{self.module_name}' failed to import: {e}") from e

        populate = getattr(module, 'populate', None)
        if not callable(populate):
            raise OverrideLoadError(f"Override module '{self.module_name}' has no populate(entries) function")
        before = set(entries)
        populate(entries)
        log.info(
            "Override module '%s' applied (%d new key(s), %d total)",
            self.module_name,
            len(set(entries) - before),
            len(entries),
        )

    def _is_missing(self, name: str | None) -> bool:
        """True when the override module (or a parent package of it) is the one not found."""
        return name is not None and (self.module_name == name or self.module_name.startswith(f'{name}.'))

    def __repr__(self) -> str:
        return f'ModuleOverrideHook({self.module_name!r})'
