"""
Sanitization of untrusted text for filesystem names and query strings.

The transformation is an ordered chain of independent passes (see
``xpath_sanitizer.utils.strings``):

1. permissive hard-stops (command separator, ``*.txt.<ext>`` names)
2. control characters
3. path separators
4. all-dots check
5. markup tags
6. metacharacters
7. allow-list filter
8. whitespace and dot spacing
9. leading/trailing dots and underscores
10. length cap with extension preservation
11. final defensive pass

Degenerate input (absent, blank or all dots) is handled according to an
``InvalidInputPolicy``: either it sanitizes to ``""`` or it raises
``InvalidInputError``.
"""

# Standard library imports
from typing import Iterable, Optional, Union

# Local/package imports
from ..utils import strings
from ..utils.logger import get_logger
from .exceptions import InvalidInputError
from .types import MAX_LENGTH, InvalidInputPolicy

logger = get_logger(__name__)


class Sanitizer:
    """Stateless sanitizer carrying only its policy and length cap.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(
        self,
        policy: Union[InvalidInputPolicy, str] = InvalidInputPolicy.EMPTY_RESULT,
        max_length: int = MAX_LENGTH,
    ):
        if isinstance(max_length, bool) or not isinstance(max_length, int):
            raise TypeError(
                f"max_length must be an integer, got {type(max_length).__name__}"
            )
        if not 1 <= max_length <= MAX_LENGTH:
            raise ValueError(
                f"max_length must be between 1 and {MAX_LENGTH}, got {max_length}"
            )
        self.policy = InvalidInputPolicy.from_value(policy)
        self.max_length = max_length

    @property
    def strict(self) -> bool:
        return self.policy is InvalidInputPolicy.RAISE_ERROR

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(policy={self.policy.value!r}, "
            f"max_length={self.max_length})"
        )

    def _reject(self, message: str, reason: str) -> str:
        """Apply the policy to degenerate input."""
        if self.strict:
            raise InvalidInputError(message, reason=reason)
        logger.debug("Degenerate input (%s) sanitized to empty", reason)
        return ""

    def sanitize(self, text: Optional[str]) -> str:
        """
        Sanitize a single value.

        Args:
            text: Untrusted input, or None.

        Returns:
            str: The sanitized value, possibly empty.

        Raises:
            InvalidInputError: Under the strict policy, for None, blank
                input or input made only of dots.
            TypeError: If text is neither None nor a string.
        """
        if text is None:
            return self._reject("Input cannot be None", InvalidInputError.ABSENT)
        if not isinstance(text, str):
            raise TypeError(f"Expected str or None, got {type(text).__name__}")
        if text == "":
            return ""
        if strings.is_blank(text):
            return self._reject("Input cannot be blank", InvalidInputError.BLANK)

        if not self.strict:
            if strings.has_command_separator(text):
                logger.debug("Command separator found, input rejected")
                return ""
            if strings.has_double_extension(text):
                logger.debug("Double extension found, input rejected")
                return ""

        s = strings.strip_control_chars(text)
        s = strings.strip_separators(s)
        if strings.is_all_dots(s):
            return self._reject(
                "Name cannot consist only of dots", InvalidInputError.ALL_DOTS
            )

        s = strings.strip_markup(s)
        s = strings.strip_metacharacters(s)
        s = strings.keep_allowed_chars(s)

        s = s.strip()
        if not s:
            return ""
        s = strings.collapse_whitespace(s)
        if strings.is_all_dots(s):
            return self._reject(
                "Name cannot consist only of dots", InvalidInputError.ALL_DOTS
            )

        s = strings.trim_dots_underscores(s)
        if not s:
            return ""

        if len(s) > self.max_length:
            logger.debug("Truncating %d code points to %d", len(s), self.max_length)
            s = strings.truncate(s, self.max_length)

        s = strings.final_pass(s)

        # Whitespace normalization can assemble a *.txt.<ext> name from parts
        if not self.strict and strings.has_double_extension(s):
            return ""
        return s

    def sanitize_all(
        self, values: Iterable[Optional[str]], separator: str = ""
    ) -> str:
        """Sanitize each value independently and join them in input order."""
        return separator.join(self.sanitize(value) for value in values)


_DEFAULT_SANITIZERS = {policy: Sanitizer(policy) for policy in InvalidInputPolicy}


def sanitize(
    text: Optional[str],
    policy: Union[InvalidInputPolicy, str] = InvalidInputPolicy.EMPTY_RESULT,
) -> str:
    """Sanitize text with the default length cap.

    Example:
        >>> sanitize("../../etc/passwd")
        'etcpasswd'
    """
    return _DEFAULT_SANITIZERS[InvalidInputPolicy.from_value(policy)].sanitize(text)


def sanitize_all(
    values: Iterable[Optional[str]],
    separator: str = "",
    policy: Union[InvalidInputPolicy, str] = InvalidInputPolicy.EMPTY_RESULT,
) -> str:
    """Sanitize a sequence of values and join the results with separator."""
    sanitizer = _DEFAULT_SANITIZERS[InvalidInputPolicy.from_value(policy)]
    return sanitizer.sanitize_all(values, separator=separator)
