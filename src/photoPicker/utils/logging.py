"""Logging helpers for photoPicker.

The package logs cache decisions and scans at DEBUG. Set
``PHOTOPICKER_LOG_LEVEL`` (``DEBUG``, ``INFO``, ...) to change the level,
or call :func:`set_log_level` from the host application.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "PHOTOPICKER_LOG_LEVEL"
DEFAULT_LEVEL = logging.INFO

_LOGGER: Optional[logging.Logger] = None


def resolve_level(value: Union[str, int, None]) -> int:
    """Turn a level name or number into a logging level, defaulting to INFO."""

    if value is None:
        return DEFAULT_LEVEL
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else DEFAULT_LEVEL


def get_logger() -> logging.Logger:
    """Return the ``photoPicker`` logger, configuring it on first use."""

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("photoPicker")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(resolve_level(os.environ.get(LOG_LEVEL_ENV)))
    return _LOGGER


def set_log_level(level: Union[str, int]) -> None:
    get_logger().setLevel(resolve_level(level))


logger = get_logger()
