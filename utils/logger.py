# -*- coding: utf-8 -*-
"""
Logging configuration for the profile wizard.

One application logger ("profile_wizard") with:
- a rotating log file (DEBUG and above), unless LOG_TO_FILE is off
- stdout output at the configured LOG_LEVEL
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

APP_LOGGER_NAME = "profile_wizard"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Set by setup_logger
_logger: Optional[logging.Logger] = None


def _build_file_handler(config) -> logging.Handler:
    config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        config.LOG_PATH,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=config.DATETIME_FORMAT))
    return handler


def _build_console_handler(config) -> logging.Handler:
    # Unknown level names fall back to INFO
    level = logging.getLevelName(config.LOG_LEVEL)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level if isinstance(level, int) else logging.INFO)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger() -> logging.Logger:
    """
    (Re)configure the application logger from Config.

    Existing handlers are replaced, so calling this twice does not
    duplicate output.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if Config.LOG_TO_FILE:
        logger.addHandler(_build_file_handler(Config))
    logger.addHandler(_build_console_handler(Config))

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child of the application logger, configuring it on first use."""
    if _logger is None:
        setup_logger()
    return _logger.getChild(name)
