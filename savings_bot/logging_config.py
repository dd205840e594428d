"""Logging setup shared by the app factory and the WSGI entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER = "savings_bot"

_LOGGING_CONFIGURED = False


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the package logger; repeat calls only change the level."""
    global _LOGGING_CONFIGURED

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    if not _LOGGING_CONFIGURED:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        _LOGGING_CONFIGURED = True
    return logger
