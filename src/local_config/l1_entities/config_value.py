"""Configuration value types — pure data, no infrastructure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, cast

# Values come from untracked sources the base code cannot see, so the
# mapping stays heterogeneous; callers know the expected type per key.
ConfigValue = Any

T = TypeVar('T')


class ReadableConfig(Protocol):
    """Anything with a dict-style get(key, default), such as ConfigStore."""

    def get(self, key: str, default: ConfigValue = None) -> ConfigValue: ...


@dataclass(frozen=True)
class ConfigOption(Generic[T]):
    """Named, annotated handle for one configuration key.

    Reading does not validate the stored value; the annotation documents
    what the override source is expected to provide.
    """

    key: str
    default: T | None = None

    def read(self, config: ReadableConfig) -> T | None:
        return cast('T | None', config.get(self.key, self.default))
