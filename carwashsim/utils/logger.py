"""Logging helpers."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_default_level = logging.INFO
_managed = set()


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Create or fetch a named logger writing to stderr.

    Args:
        name: Logger name, usually the owning class name
        level: Logging level name; defaults to the package-wide level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    elif name not in _managed:
        logger.setLevel(_default_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _managed.add(name)
    return logger


def set_level(level: str) -> None:
    """Apply a level to every logger created through setup_logger, now and later."""
    global _default_level
    _default_level = getattr(logging, level.upper(), logging.INFO)
    for name in _managed:
        logging.getLogger(name).setLevel(_default_level)
