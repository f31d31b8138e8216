"""Location of the project root and its .env file."""

import os
from functools import lru_cache
from pathlib import Path

ROOT_MARKERS = (".env", "pyproject.toml")


@lru_cache(maxsize=1)
def get_root() -> Path:
    """Get the directory the command line reads its .env file from.

    XPATH_SANITIZER_PROJECT_ROOT wins when it names an existing directory.
    Otherwise the nearest directory at or above the working directory that
    holds a .env or pyproject.toml is used, falling back to the working
    directory itself.
    """
    if root_env := os.getenv("XPATH_SANITIZER_PROJECT_ROOT"):
        root_path = Path(root_env).expanduser().resolve()
        if root_path.is_dir():
            return root_path

    cwd = Path.cwd().resolve()
    for candidate in (cwd, *cwd.parents):
        if any((candidate / marker).exists() for marker in ROOT_MARKERS):
            return candidate

    return cwd


def get_env_file() -> Path:
    """Path of the .env file under the project root (it may not exist)."""
    return get_root() / ".env"


def clear_root() -> None:
    """Clear the project root cache."""
    get_root.cache_clear()
