"""Process-wide sanitizer configuration."""

# Standard library imports
from typing import Optional

# Local imports
from .base import SanitizerConfig

_config: Optional[SanitizerConfig] = None


def get_config(force_refresh: bool = False) -> SanitizerConfig:
    """Get the shared configuration, reading the environment on first use.

    Args:
        force_refresh: If True, re-read the environment even if a
            configuration was already built

    Returns:
        SanitizerConfig instance
    """
    global _config

    if force_refresh or _config is None:
        _config = SanitizerConfig()
    return _config


def clear_config() -> None:
    """Forget the shared configuration so the next call re-reads the environment."""
    global _config

    _config = None
