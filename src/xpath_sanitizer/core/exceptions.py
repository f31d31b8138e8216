"""
Custom exceptions for xpath-sanitizer.

The exception hierarchy is organized as follows:

- SanitizerError: Base exception for all xpath-sanitizer errors
  - InvalidInputError: Degenerate input rejected under the strict policy
  - ConfigError: Configuration issues

Hostile input (injection payloads, traversal sequences, oversized names)
never raises; it is filtered.
"""

from typing import Optional


class SanitizerError(Exception):
    """Base exception class for xpath-sanitizer."""

    pass


class InvalidInputError(SanitizerError, ValueError):
    """Raised when the strict policy rejects absent, blank or all-dots input."""

    ABSENT = "absent"
    BLANK = "blank"
    ALL_DOTS = "all_dots"

    def __init__(self, message: str, reason: Optional[str] = None):
        self.reason = reason
        super().__init__(message)


class ConfigError(SanitizerError):
    """Raised when there's a configuration error."""

    pass
