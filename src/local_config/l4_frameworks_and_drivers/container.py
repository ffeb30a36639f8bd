"""Dependency container — composition root for the configuration store."""

from __future__ import annotations

from local_config.l2_use_cases.config_store import ConfigStore
from local_config.l2_use_cases.ports.override_hook import OverrideHook
from local_config.l3_interface_adapters.gateways.chained_override_hook import ChainedOverrideHook
from local_config.l3_interface_adapters.gateways.module_override_hook import ModuleOverrideHook
from local_config.l3_interface_adapters.gateways.yaml_override_hook import YamlOverrideHook
from local_config.l4_frameworks_and_drivers.override_settings import OverrideSettings


class DependencyContainer:
    """Creates and wires the store. Pass an explicit hook to bypass discovery."""

    def __init__(
        self,
        override: OverrideHook | None = None,
        settings: OverrideSettings | None = None,
    ) -> None:
        self.settings = settings or OverrideSettings.from_env()
        self.override: OverrideHook = override if override is not None else self.default_override(self.settings)
        self.store = ConfigStore(self.override)

    @staticmethod
    def default_override(settings: OverrideSettings) -> ChainedOverrideHook:
        """YAML files lowest precedence first, then the Python module on top."""
        hooks: list[OverrideHook] = [YamlOverrideHook(path) for path in reversed(settings.files)]
        if settings.module:
            hooks.append(ModuleOverrideHook(settings.module))
        return ChainedOverrideHook(hooks)
