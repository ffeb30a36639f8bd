"""Domain error types."""


class FrozenConfigError(Exception):
    """Raised on a write after the configuration store has been constructed."""


class OverrideLoadError(Exception):
    """Raised when an override source exists but cannot be applied."""
