# xpath_sanitizer/config/__init__.py
"""Configuration management."""

# Local imports
from ..core.exceptions import ConfigError
from .base import SanitizerConfig
from .factory import clear_config, get_config
from .paths import clear_root, get_env_file, get_root

__all__ = [
    "SanitizerConfig",
    "get_config",
    "clear_config",
    "ConfigError",
    "get_env_file",
    "get_root",
    "clear_root",
]
