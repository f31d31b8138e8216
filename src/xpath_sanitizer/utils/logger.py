"""
Centralized logging configuration for xpath-sanitizer.
"""

# Standard library imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO

# ANSI color codes for console output
COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",  # Reset
}

# Marks handlers installed by set_logger so repeated calls replace them
_HANDLER_MARK = "_xpath_sanitizer_handler"


class ColoredFormatter(logging.Formatter):
    """Custom formatter adding colors to console output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color."""
        orig_levelname = record.levelname
        if record.levelname in COLORS:
            record.levelname = (
                f"{COLORS[record.levelname]}{record.levelname}{COLORS['RESET']}"
            )

        result = super().format(record)

        record.levelname = orig_levelname
        return result


def set_logger(
    log_file: Optional[Path] = None,
    max_bytes: int = 10_000_000,
    backup_count: int = 5,
    verbose: bool = False,
    debug: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure and return the root logger.

    Console output goes to stderr by default; stdout carries the sanitized
    values when running from the command line.
    """
    logger = logging.getLogger()

    base_level = (
        logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    )
    logger.setLevel(base_level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()

    console_formatter = ColoredFormatter(
        "%(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_formatter = logging.Formatter(
        (
            "%(asctime)s - %(name)s - %(levelname)s - "
            "%(filename)s:%(lineno)d - %(message)s"
        ),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(console_formatter)
    setattr(console_handler, _HANDLER_MARK, True)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setFormatter(file_formatter)
        setattr(file_handler, _HANDLER_MARK, True)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
