"""
Centralized logging configuration for line-sift.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .constants import LOG_DATE_FORMAT, LOG_FORMAT


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging for the line_sift package logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        format_string: Custom format string for log messages

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = LOG_FORMAT

    numeric_level = getattr(logging, level.upper())

    logger = logging.getLogger("line_sift")
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(format_string, LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_handler.setFormatter(logging.Formatter(format_string, LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    # File handler wants DEBUG even when the console is quieter
    logger.setLevel(logging.DEBUG if log_file else numeric_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    if name.startswith("line_sift"):
        return logging.getLogger(name)
    return logging.getLogger(f"line_sift.{name}")
