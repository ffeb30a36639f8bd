"""Logging setup for the lcfg logger tree."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = '%(asctime)s %(levelname)s %(message)s'


def setup_logging(level: int = logging.INFO, log_path: Path | None = None) -> logging.Handler:
    """Attach a stderr (or file, when *log_path* is given) handler to the lcfg logger."""
    handler: logging.Handler
    if log_path is not None:
        handler = logging.FileHandler(log_path, encoding='utf-8')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root = logging.getLogger('lcfg')
    root.setLevel(level)
    root.addHandler(handler)
    root.debug('Logging started → %s', log_path or 'stderr')
    return handler
