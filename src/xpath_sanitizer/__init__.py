"""
xpath-sanitizer - Deterministic sanitization of untrusted text.

This module provides the main entry point for the xpath_sanitizer package. It
re-exports the sanitizer API and carries metadata about the package such as
version, title, author, and license, read from the installed distribution
when available.
"""

from importlib import metadata as importlib_metadata
from importlib.metadata import PackageNotFoundError

# Local/package imports
from .core import (
    MAX_LENGTH,
    ConfigError,
    InvalidInputError,
    InvalidInputPolicy,
    Sanitizer,
    SanitizerError,
    sanitize,
    sanitize_all,
)
from .utils.logger import get_logger

# Configure package-level logger
package_logger = get_logger(__name__)

__version__ = "0.0.0"
__title__ = "xpath-sanitizer"
__author__ = ""
__license__ = ""


def get_metadata():
    """Extract version and metadata from package distribution when available."""

    global __version__, __title__, __author__, __license__

    try:
        _meta = importlib_metadata.metadata("xpath-sanitizer")
    except PackageNotFoundError:
        return

    __version__ = _meta.get("Version", __version__)
    __title__ = _meta.get("Name", __title__)
    __author__ = _meta.get("Author", __author__)
    __license__ = _meta.get("License", __license__)


get_metadata()

__all__ = [
    "__version__",
    "__title__",
    "__author__",
    "__license__",
    "MAX_LENGTH",
    "ConfigError",
    "InvalidInputError",
    "InvalidInputPolicy",
    "Sanitizer",
    "SanitizerError",
    "sanitize",
    "sanitize_all",
]
