"""Gateway: ordered composition of override hooks."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping

from local_config.l1_entities.config_value import ConfigValue
from local_config.l2_use_cases.ports.override_hook import OverrideHook


class ChainedOverrideHook:
    """Runs each hook in order on the same entries; later hooks win."""

    def __init__(self, hooks: Iterable[OverrideHook]) -> None:
        self.hooks: list[OverrideHook] = list(hooks)

    def populate(self, entries: MutableMapping[str, ConfigValue]) -> None:
        for hook in self.hooks:
            hook.populate(entries)

    def __repr__(self) -> str:
        return f'ChainedOverrideHook({self.hooks!r})'
