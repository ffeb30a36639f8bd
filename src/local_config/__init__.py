"""local-config -- process-wide configuration with untracked local overrides."""

__version__ = '0.1.0'
