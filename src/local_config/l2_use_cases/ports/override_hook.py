"""Port: configuration override hook."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Protocol

from local_config.l1_entities.config_value import ConfigValue


class OverrideHook(Protocol):
    """Optional capability that populates configuration entries at startup."""

    def populate(self, entries: MutableMapping[str, ConfigValue]) -> None:
        """Insert or overwrite keys in *entries*. Called once per store."""
        ...
