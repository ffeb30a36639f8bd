"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import sys
from collections.abc import Iterator, MutableMapping
from pathlib import Path

import pytest

from local_config.l1_entities.config_value import ConfigValue
from local_config.l4_frameworks_and_drivers import registry
from local_config.l4_frameworks_and_drivers.override_settings import OverrideSettings

# --- Protocol-conforming Fakes ---


class FakeOverrideHook:
    """Fake override hook — implements OverrideHook protocol."""

    def __init__(self, values: dict[str, ConfigValue] | None = None):
        self._values = dict(values or {})
        self.populate_calls = 0
        self.received: MutableMapping[str, ConfigValue] | None = None

    def populate(self, entries: MutableMapping[str, ConfigValue]) -> None:
        self.populate_calls += 1
        self.received = entries
        entries.update(self._values)


# --- Standard Fixtures ---


@pytest.fixture
def fake_hook() -> FakeOverrideHook:
    return FakeOverrideHook({'foo': 'bar', 'count': 42})


@pytest.fixture
def no_discovery(monkeypatch) -> OverrideSettings:
    """Point default discovery at nothing so the developer's own overrides never leak in."""
    monkeypatch.delenv('LOCAL_CONFIG_FILE', raising=False)
    monkeypatch.setenv('LOCAL_CONFIG_MODULE', '')
    monkeypatch.setattr(
        'local_config.l4_frameworks_and_drivers.override_settings.DEFAULT_OVERRIDE_PATHS',
        [],
    )
    return OverrideSettings(module=None, files=[])


@pytest.fixture
def clean_registry(no_discovery) -> Iterator[None]:
    registry.reset_instance()
    yield
    registry.reset_instance()


@pytest.fixture
def sample_override_yaml(tmp_path: Path) -> Path:
    content = """\
api_key: "s3cr3t"
base_url: "https://api.example.com"
timeout: 2.5
retries: 3
debug: true
features:
  beta: true
  flags: [a, b]
"""
    p = tmp_path / 'config.local.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def override_module(tmp_path: Path, monkeypatch) -> Iterator[str]:
    """Write an importable override module and return its name."""
    name = 'lcfg_test_overrides'
    (tmp_path / f'{name}.py').write_text(
        'def populate(entries):\n    entries["foo"] = "from-module"\n    entries["count"] = 7\n',
        encoding='utf-8',
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    sys.modules.pop(name, None)
    yield name
    sys.modules.pop(name, None)
