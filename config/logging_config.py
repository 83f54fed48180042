"""
Logging configuration for the MLB reference data package.

Console logging always; file logging when a log file is configured.
"""

import logging
import sys
from typing import Optional
from pathlib import Path

from config.settings import get_settings

DEFAULT_FORMAT = (
    '%(asctime)s - %(name)s - %(levelname)s - '
    '%(filename)s:%(lineno)d - %(message)s'
)


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None
) -> logging.Logger:
    """
    Configure application logging.

    Level and file fall back to the application settings when not given.
    With ``DEBUG=true`` in the settings the default level is DEBUG.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for file logging
        log_format: Optional custom log format

    Returns:
        logging.Logger: Configured root logger
    """
    if log_level is None or log_file is None:
        app = get_settings().app
        if log_level is None:
            log_level = 'DEBUG' if app.debug else app.log_level
        log_file = log_file or app.log_file

    formatter = logging.Formatter(log_format or DEFAULT_FORMAT)

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    logger.handlers = []

    # stderr keeps report output on stdout clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)
