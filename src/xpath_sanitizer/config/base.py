"""Base configuration types."""

# Standard library imports
import os
from dataclasses import asdict, dataclass, field

# Local imports
from ..core.exceptions import ConfigError
from ..core.types import MAX_LENGTH, InvalidInputPolicy
from .validation import ConfigValidator, ValidationError

ENV_PREFIX = "XPATH_SANITIZER_"


@dataclass
class SanitizerConfig:
    """Sanitizer configuration.

    Every field can be overridden with an ``XPATH_SANITIZER_<FIELD>``
    environment variable; the environment wins over constructor arguments.
    """

    # Degenerate input handling: "empty" or "raise"
    on_invalid_input: str = field(default=InvalidInputPolicy.EMPTY_RESULT.value)
    max_length: int = field(default=MAX_LENGTH)

    # Delimiter used when joining several sanitized values
    separator: str = field(default="")

    # Log settings
    verbose: bool = field(default=False)
    debug: bool = field(default=False)

    def __post_init__(self):
        """Initialize configuration after creation."""
        self._validator = ConfigValidator()
        self._load_from_env()
        self._setup_validation()
        self._validate()

    @property
    def policy(self) -> InvalidInputPolicy:
        return InvalidInputPolicy.from_value(self.on_invalid_input)

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        for field_name, field_value in self.__class__.__dataclass_fields__.items():
            env_key = f"{ENV_PREFIX}{field_name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is None:
                continue

            field_type = field_value.type
            try:
                if field_type is bool:
                    value = env_value.strip().lower() in ("true", "1", "yes", "on")
                elif field_type is int:
                    value = int(env_value.strip())
                elif field_name == "on_invalid_input":
                    value = env_value.strip().lower()
                else:
                    # Separators may legitimately be whitespace
                    value = field_type(env_value)
                setattr(self, field_name, value)
            except ValueError as e:
                raise ConfigError(
                    f"Invalid value for {env_key}: {env_value!r} - {e}"
                ) from e

    def _setup_validation(self) -> None:
        """Set up validation rules."""
        self._validator.add_type_rule("on_invalid_input", str)
        self._validator.add_type_rule("max_length", int)
        self._validator.add_type_rule("separator", str)
        self._validator.add_type_rule("verbose", bool)
        self._validator.add_type_rule("debug", bool)

        self._validator.add_range_rule("max_length", 1, MAX_LENGTH)
        self._validator.add_choice_rule(
            "on_invalid_input", [policy.value for policy in InvalidInputPolicy]
        )

    def _validate(self) -> None:
        """Validate configuration values."""
        try:
            self._validator.validate(self.to_dict())
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def to_dict(self) -> dict:
        """Return the configuration fields as a plain dictionary."""
        return asdict(self)
