"""Tests for override discovery settings."""

from __future__ import annotations

from pathlib import Path

from local_config.l3_interface_adapters.gateways.paths import DEFAULT_OVERRIDE_MODULE, DEFAULT_OVERRIDE_PATHS
from local_config.l4_frameworks_and_drivers.override_settings import OverrideSettings


class TestOverrideSettings:
    def test_defaults(self):
        s = OverrideSettings()
        assert s.module == DEFAULT_OVERRIDE_MODULE
        assert s.files == DEFAULT_OVERRIDE_PATHS

    def test_defaults_not_shared(self):
        a, b = OverrideSettings(), OverrideSettings()
        a.files.append(Path('extra.yaml'))
        assert Path('extra.yaml') not in b.files

    def test_files_coerced_to_paths(self):
        s = OverrideSettings(files=['one.yaml'])  # type: ignore[list-item]
        assert s.files == [Path('one.yaml')]


class TestFromEnv:
    def test_empty_env_gives_defaults(self):
        s = OverrideSettings.from_env({})
        assert s.module == DEFAULT_OVERRIDE_MODULE
        assert s.files == DEFAULT_OVERRIDE_PATHS

    def test_module_env(self):
        s = OverrideSettings.from_env({'LOCAL_CONFIG_MODULE': 'my_secrets'})
        assert s.module == 'my_secrets'

    def test_empty_module_env_disables_module(self):
        s = OverrideSettings.from_env({'LOCAL_CONFIG_MODULE': ''})
        assert s.module is None

    def test_file_env_replaces_list(self, tmp_path: Path):
        target = tmp_path / 'secrets.yaml'
        s = OverrideSettings.from_env({'LOCAL_CONFIG_FILE': str(target)})
        assert s.files == [target]

    def test_reads_process_env_by_default(self, monkeypatch):
        monkeypatch.setenv('LOCAL_CONFIG_MODULE', 'from_process_env')
        assert OverrideSettings.from_env().module == 'from_process_env'
