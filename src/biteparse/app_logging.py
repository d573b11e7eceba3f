"""Logging setup for the biteparse package logger."""

from __future__ import annotations

import logging
from typing import TextIO

PACKAGE_LOGGER = "biteparse"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(
    level: int | str = logging.INFO, stream: TextIO | None = None
) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Repeated calls only change the level; the first call decides the stream
    (stderr when `stream` is None). Level names are case-insensitive.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
