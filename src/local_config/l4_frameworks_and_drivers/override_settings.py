"""Override discovery settings — lives in L4, not domain."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

from local_config.l3_interface_adapters.gateways.paths import DEFAULT_OVERRIDE_MODULE, DEFAULT_OVERRIDE_PATHS

MODULE_ENV_VAR = 'LOCAL_CONFIG_MODULE'
FILE_ENV_VAR = 'LOCAL_CONFIG_FILE'


class OverrideSettings(BaseModel):
    """Where to look for untracked override sources."""

    module: str | None = DEFAULT_OVERRIDE_MODULE  # None → no module discovery
    files: list[Path] = Field(default_factory=lambda: list(DEFAULT_OVERRIDE_PATHS))  # highest precedence first

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> OverrideSettings:
        """Apply LOCAL_CONFIG_MODULE / LOCAL_CONFIG_FILE on top of the defaults."""
        env = os.environ if environ is None else environ
        data: dict = {}
        if MODULE_ENV_VAR in env:
            data['module'] = env[MODULE_ENV_VAR] or None
        if env.get(FILE_ENV_VAR):
            data['files'] = [env[FILE_ENV_VAR]]
        return cls.model_validate(data)
