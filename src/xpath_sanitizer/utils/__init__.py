"""
Utility modules for the xpath_sanitizer package: logging setup and the
individual string passes of the sanitizer.
"""

from .logger import get_logger, set_logger

__all__ = [
    "get_logger",
    "set_logger",
]
