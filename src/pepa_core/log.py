from __future__ import annotations

import sys

from loguru import logger

from pepa_core.config import Settings, load_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str | None = None, *, settings: Settings | None = None) -> int:
    """
    Replace loguru's default sink with a single formatted stderr sink.

    The package logs nothing until an application embedding the core calls
    this once at startup. Returns the loguru handler id.
    """
    if level is None:
        level = (settings or load_settings()).log_level
    logger.remove()
    logger.enable("pepa_core")
    return logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper(), backtrace=True)
