"""Process-wide configuration store with one-time initialization."""

from __future__ import annotations

import logging
import threading

from local_config.l1_entities.errors import FrozenConfigError
from local_config.l2_use_cases.config_store import ConfigStore
from local_config.l2_use_cases.ports.override_hook import OverrideHook

log = logging.getLogger('lcfg.registry')

_lock = threading.Lock()
_instance: ConfigStore | None = None
_override: OverrideHook | None = None
_failure: BaseException | None = None  # set when construction raised; re-raised, never retried


def register_override(hook: OverrideHook | None) -> None:
    """Supply the override used when the process-wide store is first built.

    Must run before the first ``get_instance()``. ``None`` clears a previous
    registration so discovery falls back to the default sources.
    """
    global _override
    with _lock:
        if _instance is not None or _failure is not None:
            raise FrozenConfigError('Override registered after the configuration store was constructed')
        _override = hook
    log.debug('Registered override %r', hook)


def get_instance() -> ConfigStore:
    """Return the process-wide store, constructing it on first call.

    The override runs at most once. If construction raises, the same error is
    raised again on every later call.
    """
    global _instance, _failure
    instance = _instance
    if instance is not None:
        return instance
    with _lock:
        if _failure is not None:
            raise _failure
        if _instance is None:
            from local_config.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: discovery stack only built on first access
                DependencyContainer,
            )

            try:
                _instance = DependencyContainer(override=_override).store
            except Exception as e:
                _failure = e
                log.error('Configuration store construction failed: %s', e)
                raise
            log.info('Configuration store initialized (%d key(s))', len(_instance))
        return _instance


def reset_instance() -> None:
    """Forget the store, any recorded failure and any registered override. Tests only."""
    global _instance, _override, _failure
    with _lock:
        _instance = None
        _override = None
        _failure = None
