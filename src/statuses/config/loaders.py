# src/statuses/config/loaders.py

"""Configuration loaders for environment and files.

Each loader extracts raw values from one source and returns a plain
dictionary. Validation happens later, in the resolver, against ``Settings``.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

import tomllib

from . import utils

logger = logging.getLogger(__name__)

# Meta/control variables that steer resolution but aren't config fields
META_ENV_FIELDS = {"pyproject_path", "config_home"}


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


# --- Environment Loading ---


def load_env() -> Mapping[str, Any]:
    """Load configuration from ``STATUSES_*`` environment variables.

    Boolean schema fields are coerced from their string form; everything else
    is passed through for the schema to validate.
    """
    from .core import Settings  # local import to keep loaders import-light

    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(utils.ENV_PREFIX):
            continue
        field_name = key[len(utils.ENV_PREFIX) :].lower()
        if field_name in META_ENV_FIELDS:
            continue
        info = Settings.model_fields.get(field_name)
        if info is not None and info.annotation is bool:
            config[field_name] = _coerce_bool(value)
        else:
            config[field_name] = value
    return config


# --- File Loading ---


def _read_toml(path: Path) -> dict[str, Any]:
    """Read a TOML file, returning an empty dict when missing or invalid."""
    if not path.exists():
        return {}

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.debug("Ignoring unreadable config file %s: %s", path, exc)
        return {}


def _extract_table(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.statuses]`` table, or an empty dict."""
    section = data.get("tool", {}).get(utils.CONFIG_TOOL_NAME, {})
    return dict(section) if isinstance(section, dict) else {}


def load_pyproject() -> Mapping[str, Any]:
    """Load ``[tool.statuses]`` from the project pyproject.toml."""
    return _extract_table(_read_toml(utils.get_pyproject_path()))


def load_home() -> Mapping[str, Any]:
    """Load ``[tool.statuses]`` from the user's home config file."""
    return _extract_table(_read_toml(utils.get_home_config_path()))
