# src/statuses/config/utils.py

"""Configuration utilities shared by the loaders and the resolver.

Pure helpers only: path resolution with environment overrides and small
hint builders. Importing this module has no side effects.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Callable

# --- Constants ---

ENV_PREFIX = "STATUSES_"
CONFIG_TOOL_NAME = "statuses"

CONFIG_HOME_VAR = "STATUSES_CONFIG_HOME"
PYPROJECT_PATH_VAR = "STATUSES_PYPROJECT_PATH"

# --- Path Utilities ---


def get_config_path(path_type: Literal["project", "home"]) -> Path:
    """Get configuration file path with environment override support.

    Falls back to a cwd-based path for the "home" type when ``Path.home()``
    cannot be resolved (e.g. HOME unset in a restricted environment).
    """
    specs: dict[str, tuple[str, Callable[[], Path]]] = {
        "project": (
            PYPROJECT_PATH_VAR,
            lambda: Path.cwd() / "pyproject.toml",
        ),
        "home": (
            CONFIG_HOME_VAR,
            lambda: Path.home() / ".config" / "statuses.toml",
        ),
    }
    env_var, default_factory = specs[path_type]
    if override := os.environ.get(env_var):
        return Path(override)
    try:
        return default_factory()
    except RuntimeError:
        if path_type == "home":
            return Path.cwd() / "statuses.toml"
        raise


def get_pyproject_path() -> Path:
    """Return path to the project pyproject.toml."""
    return get_config_path("project")


def get_home_config_path() -> Path:
    """Return path to the user's home-level config TOML."""
    return get_config_path("home")


# --- Field Specification Helpers ---


def field_spec_hint(field: str) -> str:
    """Return a compact hint for setting a config field via env or files."""
    env_key = f"{ENV_PREFIX}{field.upper()}"
    return (
        f"Set {env_key} or [tool.{CONFIG_TOOL_NAME}] {field} in pyproject.toml "
        f"(or ~/.config/{CONFIG_TOOL_NAME}.toml)."
    )
