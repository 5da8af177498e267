"""
utils/logger.py
---------------
Logging setup for the session runner.
Every module calls `get_logger(__name__)`; the first call installs a single
stderr handler on the root logger at the configured LOG_LEVEL, so stdout
only carries the rows the runner prints.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: logging.Handler | None = None


def _resolve_level(name: str) -> int:
    """Map a level name like 'DEBUG' to its number; unknown names mean INFO."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _init_logging() -> None:
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(_resolve_level(LOG_LEVEL))
    root.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    _init_logging()
    return logging.getLogger(name)
