"""Diagnostics logging for the Ticks log bridge.

Modules report on their own behaviour through `log` from this file. It is
kept apart from the loggers the processing handler is attached to, so the
bridge never feeds its own diagnostics back into the event sink.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Final

LOGGER_NAME: Final = "ticks.bridge"
LOG_LEVEL: Final = os.getenv("TICKS_BRIDGE_LOG_LEVEL", "WARNING").upper()

# Basic color support (Windows 10+ supports ANSI sequences in recent versions).
class ColorFormatter(logging.Formatter):
    RESET = "\033[0m"
    COLORS = {
        logging.DEBUG: "\033[36m",    # Cyan
        logging.INFO: "\033[32m",     # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",    # Red
        logging.CRITICAL: "\033[41m", # Red background
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, "")
        reset = self.RESET if color else ""
        # Colour a copy so other handlers still see the plain level name.
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{reset}"
        return super().format(record)


def configure_bridge_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:  # Already configured.
        return logger

    handler = logging.StreamHandler(sys.stderr)
    formatter = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handler.setFormatter(ColorFormatter(formatter))

    logger.addHandler(handler)
    try:
        logger.setLevel(LOG_LEVEL)
    except ValueError:
        logger.setLevel(logging.WARNING)
    logger.propagate = False
    return logger


log: logging.Logger = configure_bridge_logger()
