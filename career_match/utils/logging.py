"""Logging configuration for Career Match."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Root logger for the package; modules log through children of it.
LOGGER_NAME = "career_match"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_handler: logging.Handler | None = None


def resolve_level(level: str | None) -> int:
    """Translate a level name to its numeric value (INFO when unknown or None)."""
    if level is None or level.upper() not in VALID_LEVELS:
        return logging.INFO
    return getattr(logging, level.upper())


def configure_logging(
    level: str | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure and return the package logger.

    The first call installs a single stream handler (stderr unless ``stream``
    is given); later calls only adjust the level.

    Args:
        level: Log level name. Defaults to INFO.
        format_string: Format string for log messages.
        date_format: Format string for timestamps.
        stream: Destination for log records.

    Returns:
        The configured package logger.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    log_level = resolve_level(level)
    logger.setLevel(log_level)

    if _handler is None:
        logger.handlers.clear()
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
        logger.addHandler(_handler)
        logger.propagate = False

    _handler.setLevel(log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger, e.g. ``get_logger("scoring")`` -> ``career_match.scoring``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Reset logging configuration (useful for testing)."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    _handler = None
