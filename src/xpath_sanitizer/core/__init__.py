"""
This module initializes the core components of the xpath_sanitizer package.
"""

# Local/package imports (using relative imports at package root)
from .exceptions import ConfigError, InvalidInputError, SanitizerError
from .sanitizer import Sanitizer, sanitize, sanitize_all
from .types import MAX_LENGTH, InvalidInputPolicy

__all__ = [
    "ConfigError",
    "InvalidInputError",
    "InvalidInputPolicy",
    "MAX_LENGTH",
    "Sanitizer",
    "SanitizerError",
    "sanitize",
    "sanitize_all",
]
