"""Use case: write-once key/value configuration store."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from local_config.l1_entities.config_value import ConfigValue
from local_config.l1_entities.errors import FrozenConfigError
from local_config.l2_use_cases.ports.override_hook import OverrideHook

log = logging.getLogger('lcfg.store')


class ConfigStore:
    """Key/value mapping populated once by an optional override hook.

    The hook receives a fresh dict during construction. Once it returns, a
    copy of that dict is frozen behind a read-only view; references the hook
    kept cannot reach the store.
    """

    def __init__(self, override: OverrideHook | None = None) -> None:
        entries: dict[str, ConfigValue] = {}
        if override is not None:
            override.populate(entries)
            log.debug('Override %s populated %d key(s)', type(override).__name__, len(entries))
        else:
            log.debug('No override registered; store is empty')
        self._entries: Mapping[str, ConfigValue] = MappingProxyType(dict(entries))

    @property
    def entries(self) -> Mapping[str, ConfigValue]:
        return self._entries

    def get(self, key: str, default: ConfigValue = None) -> ConfigValue:
        """Return the value for *key*, or *default* when the key is unset."""
        return self._entries.get(key, default)

    def set(self, key: str, value: ConfigValue) -> None:
        raise FrozenConfigError(f"Configuration is read-only after construction (key: '{key}')")

    def keys(self) -> list[str]:
        return sorted(self._entries, key=str)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f'ConfigStore(keys={self.keys()!r})'
