# -*- coding: utf-8 -*-
"""
Logging configuration for the wizard core.

All modules log through child loggers of the ``mtcit`` logger so that the
hosting screen layer can attach its own handlers in one place.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER_NAME = "mtcit"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def setup_logger(
    log_path: Optional[Union[str, Path]] = None,
    console_level: Optional[int] = None
) -> logging.Logger:
    """
    Setup the core logger with a rotating file handler and a console handler.

    Args:
        log_path: Override for the log file (defaults to Config.LOG_PATH)
        console_level: Override for the console threshold (defaults to Config.CONSOLE_LOG_LEVEL)
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path else Config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Re-running setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level if console_level is not None else Config.CONSOLE_LOG_LEVEL)
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
