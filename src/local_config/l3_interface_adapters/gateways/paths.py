"""Shared path constants for override discovery."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_path

CONFIG_DIR = user_config_path('local-config')

DEFAULT_OVERRIDE_MODULE = 'local_config_overrides'

# Highest precedence first.
DEFAULT_OVERRIDE_PATHS = [
    Path('config.local.yaml'),
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
