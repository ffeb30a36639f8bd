"""Gateway: untracked YAML file override — implements OverrideHook port."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from pathlib import Path

import yaml

from local_config.l1_entities.config_value import ConfigValue
from local_config.l1_entities.errors import OverrideLoadError

log = logging.getLogger('lcfg.override')


class YamlOverrideHook:
    """Copies the top-level mapping of a YAML file into the entries."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def populate(self, entries: MutableMapping[str, ConfigValue]) -> None:
        data = load_override_file(self.path)
        for key, value in data.items():
            entries[str(key)] = value
        if data:
            log.info('Override file %s applied (%d key(s))', self.path, len(data))

    def __repr__(self) -> str:
        return f'YamlOverrideHook({str(self.path)!r})'


def load_override_file(path: Path) -> dict:
    """Read *path* as a YAML mapping. A missing or empty file yields ``{}``."""
    if not path.exists():
        log.debug('Override file %s not found; skipping', path)
        return {}
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise OverrideLoadError(f'Override file could not be read: {path} ({e})') from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise OverrideLoadError(f'Override file is not valid YAML: {path}') from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise OverrideLoadError(f'Override file must contain a mapping, got {type(data).__name__}: {path}')
    return data
