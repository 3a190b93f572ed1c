"""Logging configuration for the database-updater server.

The stdio transport owns stdout, so log records always go to stderr
(and optionally to a file).
"""

import logging
import sys
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def SetupLogging(level: str = "INFO", logFile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Args:
        level: logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        logFile: optional path of a file receiving the same records
    """

    logger = logging.getLogger("dbupdater")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logFile:
        file_handler = logging.FileHandler(logFile)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
