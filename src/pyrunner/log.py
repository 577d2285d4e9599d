"""Logging helpers for pyrunner.

``get_logger`` hands out loggers named after the caller's ``__name__`` and
never touches handlers, so importing pyrunner has no logging side effects.
The ``pyrunner`` command calls ``configure_logging`` once at startup; it
installs a single stream handler on the root logger, with the level taken
from ``--log-level`` or else the ``PYRUNNER_LOG_LEVEL`` environment variable:

* ``WARNING`` (default) shows problems only.
* ``INFO`` adds run lifecycle messages (start, game over, restart).
* ``DEBUG`` adds per-obstacle spawn and clear messages.

>>> from pyrunner.log import get_logger
>>> log = get_logger(__name__)
>>> log.info("engine started")
"""

from __future__ import annotations

import logging
import os
from typing import Final

_DEFAULT_LEVEL: Final[int] = logging.WARNING

_LOGGER_CACHE: dict[str, logging.Logger] = {}


def _initial_level() -> int:
    """Resolve the level from ``PYRUNNER_LOG_LEVEL``, falling back to WARNING."""
    level_name = os.getenv("PYRUNNER_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, _DEFAULT_LEVEL)
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def configure_logging(level_name: str | None = None) -> None:
    """Install the stream handler once and set the root level.

    *level_name* overrides ``PYRUNNER_LOG_LEVEL``.  The level is applied even
    when another handler is already installed.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
        handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(level_name.upper() if level_name else _initial_level())


def get_logger(name: str) -> logging.Logger:
    """Return a cached logger for *name*; no handlers are installed here."""
    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]
    logger = logging.getLogger(name)
    _LOGGER_CACHE[name] = logger
    return logger
