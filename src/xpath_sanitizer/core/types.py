"""Type definitions for xpath-sanitizer.

This module defines the shared types and constants used by the sanitizer,
the configuration layer and the command line interface.
"""

# Standard library imports
from enum import Enum
from typing import Union

# Maximum length of a sanitized value, in code points
MAX_LENGTH = 255


class InvalidInputPolicy(str, Enum):
    """How degenerate input (absent, blank or all dots) is handled."""

    EMPTY_RESULT = "empty"
    RAISE_ERROR = "raise"

    @classmethod
    def from_value(
        cls, value: Union[str, "InvalidInputPolicy"]
    ) -> "InvalidInputPolicy":
        """Resolve a policy from its enum member or string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown invalid-input policy {value!r} (expected one of: {choices})"
            ) from e
