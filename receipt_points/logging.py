"""Logging setup for the receipt points service.

Usage:
    from receipt_points.logging import get_logger
    logger = get_logger(__name__)

The level comes from the LOG_LEVEL setting (DEBUG, INFO, WARNING, ERROR).
"""

import logging
import sys

from .config import settings

ROOT_LOGGER = "receipt_points"

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_logging_configured = False


def configure_logging(level: int | None = None) -> None:
    """Attach a stderr handler to the package logger, once."""
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = _LEVELS.get(settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT))

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace.

    Args:
        name: Module name, typically __name__
    """
    configure_logging()
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
