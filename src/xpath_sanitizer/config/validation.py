"""
Configuration validation system.

Rules check a single configuration field each; ``ConfigValidator`` groups
them by field and runs them against a configuration dictionary.
"""

# Standard library imports
from typing import Any, Dict, Iterable, List, Optional, Type, Union


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


class ConfigValidationError(ValidationError):
    """Raised when configuration validation fails."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class RangeValidationError(ConfigValidationError):
    """Raised when a value is outside its valid range."""

    pass


class ValidationRule:
    """Base class for validation rules."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        self.message = message

    def validate(self, value: Any) -> None:
        """Validate a value against this rule."""
        raise NotImplementedError


class TypeRule(ValidationRule):
    """Rule for type validation."""

    def __init__(
        self,
        field: str,
        expected_type: Union[Type, tuple[Type, ...]],
        message: Optional[str] = None,
        allow_none: bool = False,
    ):
        super().__init__(field, message)
        self.expected_type = expected_type
        self.allow_none = allow_none

    def validate(self, value: Any) -> None:
        """Validate value type."""
        if value is None:
            if not self.allow_none:
                raise ConfigValidationError(
                    self.field, self.message or "Value cannot be None"
                )
            return

        # bool is an int subclass but never a valid number here
        if isinstance(value, bool) and self.expected_type is not bool:
            raise ConfigValidationError(
                self.field, self.message or "Expected a number, got bool"
            )

        if not isinstance(value, self.expected_type):
            expected = getattr(self.expected_type, "__name__", str(self.expected_type))
            raise ConfigValidationError(
                self.field,
                self.message
                or f"Expected type {expected}, got {type(value).__name__}",
            )


class RangeRule(ValidationRule):
    """Rule for range validation."""

    def __init__(
        self,
        field: str,
        min_value: Optional[Any],
        max_value: Optional[Any],
        message: Optional[str] = None,
    ):
        super().__init__(field, message)
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> None:
        """Validate value range."""
        if value is None:
            return

        if self.min_value is not None and value < self.min_value:
            raise RangeValidationError(
                self.field,
                self.message
                or f"Value {value} is less than minimum {self.min_value}",
            )

        if self.max_value is not None and value > self.max_value:
            raise RangeValidationError(
                self.field,
                self.message
                or f"Value {value} is greater than maximum {self.max_value}",
            )


class ChoiceRule(ValidationRule):
    """Rule restricting a value to a fixed set of choices."""

    def __init__(
        self, field: str, choices: Iterable[Any], message: Optional[str] = None
    ):
        super().__init__(field, message)
        self.choices = tuple(choices)

    def validate(self, value: Any) -> None:
        if value is None:
            return

        if value not in self.choices:
            allowed = ", ".join(repr(choice) for choice in self.choices)
            raise ConfigValidationError(
                self.field,
                self.message or f"Value {value!r} is not one of {allowed}",
            )


class ConfigValidator:
    """Configuration validator grouping rules by field."""

    def __init__(self):
        self.rules: Dict[str, List[ValidationRule]] = {}

    def add_rule(self, rule: ValidationRule) -> None:
        """Add a validation rule."""
        if rule.field not in self.rules:
            self.rules[rule.field] = []
        self.rules[rule.field].append(rule)

    def add_type_rule(
        self,
        field: str,
        expected_type: Union[Type, tuple[Type, ...]],
        allow_none: bool = False,
        message: Optional[str] = None,
    ) -> None:
        """Add a type validation rule."""
        self.add_rule(TypeRule(field, expected_type, message, allow_none))

    def add_range_rule(
        self,
        field: str,
        min_value: Optional[Any] = None,
        max_value: Optional[Any] = None,
        message: Optional[str] = None,
    ) -> None:
        """Add a range validation rule."""
        self.add_rule(RangeRule(field, min_value, max_value, message))

    def add_choice_rule(
        self, field: str, choices: Iterable[Any], message: Optional[str] = None
    ) -> None:
        """Add a choice validation rule."""
        self.add_rule(ChoiceRule(field, choices, message))

    def validate(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration against all rules.

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValidationError: If validation fails
        """
        for field, value in config.items():
            self.validate_field(field, value)

    def validate_field(self, field: str, value: Any) -> None:
        """
        Validate a single field value.

        Args:
            field: Field name to validate
            value: Value to validate

        Raises:
            ValidationError: If validation fails
        """
        for rule in self.rules.get(field, []):
            rule.validate(value)


__all__ = [
    "ChoiceRule",
    "ConfigValidationError",
    "ConfigValidator",
    "RangeRule",
    "RangeValidationError",
    "TypeRule",
    "ValidationError",
    "ValidationRule",
]
