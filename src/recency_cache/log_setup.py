"""Logging configuration for command-line use."""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "recency_cache"
_CONFIGURED_ATTR = "_recency_cache_handler"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the package logger and set its level."""
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.strip().upper(), logging.WARNING))

    if not any(getattr(handler, _CONFIGURED_ATTR, False) for handler in logger.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        setattr(handler, _CONFIGURED_ATTR, True)
        logger.addHandler(handler)

    return logger
