"""
Logging configuration for the ``maintlog`` package.

- ``configure_logging(level)``: attach a single ``StreamHandler`` to the
  package logger. Called once by the CLI at startup.
- ``get_logger(name)``: acquire a module logger. Until the package is
  configured a ``NullHandler`` keeps library use silent.

Library modules never attach their own handlers.
"""

import logging
import os
import sys
from typing import IO, Optional, Union

PKG_LOGGER_NAME = "maintlog"
LOG_LEVEL_ENV = "MAINT_LOG_LEVEL"
DEFAULT_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"

_configured = False


def _lookup_level(level: Union[int, str, None]) -> Optional[int]:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        numeric = getattr(logging, name, None)
        if isinstance(numeric, int):
            return numeric
    return None


def resolve_level(*candidates: Union[int, str, None]) -> int:
    """First candidate that names a valid level, or WARNING if none does."""
    for candidate in candidates:
        level = _lookup_level(candidate)
        if level is not None:
            return level
    return logging.WARNING


def parse_level(level: Union[int, str, None]) -> int:
    """Resolve an int, level name or numeric string to a logging level.

    Falls back to MAINT_LOG_LEVEL, then WARNING, when level is unusable.
    """
    return resolve_level(level, os.getenv(LOG_LEVEL_ENV))


def configure_logging(
    level: Union[int, str, None] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure the package logger exactly once."""
    global _configured
    if _configured:
        return

    logger = logging.getLogger(PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    resolved = parse_level(level)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt=DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured."""
    pkg_logger = logging.getLogger(PKG_LOGGER_NAME)
    if not _configured and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
