# src/statuses/config/core.py

"""Configuration schema and resolution.

Configuration is resolved once at entry points into an immutable
``StatusesConfig`` that is then handed to ``build_registry``:
- ``Settings`` is the single source of truth for fields, types and defaults
- loaders return plain dicts, merged here with last-wins precedence
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError

from statuses.errors import ConfigurationError

from .utils import field_spec_hint

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Pydantic settings schema for configuration validation and defaults."""

    # Reject trailing text when parsing numeric strings ("404abc").
    strict_parse: bool = Field(default=False)
    # Validate the code table at load time instead of trusting it.
    validate_table: bool = Field(default=False)

    model_config = {"extra": "ignore"}


@cache
def _default_settings() -> dict[str, Any]:
    return Settings().model_dump()


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class StatusesConfig:
    """Immutable configuration consumed by ``build_registry``.

    Example:
        config = StatusesConfig(strict_parse=True)
        registry = build_registry(config=config)
    """

    strict_parse: bool = False
    validate_table: bool = False


_DOTENV_LOADED: bool = False


def _try_load_dotenv() -> None:
    """Load a .env file into the environment once per process."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


# --- Public resolution API ---


def resolve_config(overrides: Mapping[str, Any] | None = None) -> StatusesConfig:
    """Resolve configuration from all sources into a StatusesConfig.

    Precedence: defaults < home < project < env < overrides.

    Args:
        overrides: Programmatic configuration overrides.

    Returns:
        A frozen StatusesConfig.

    Raises:
        ConfigurationError: If a resolved value fails schema validation.
    """
    _try_load_dotenv()

    from .loaders import load_env, load_home, load_pyproject

    merged = _merge_layers(
        load_home(),
        load_pyproject(),
        load_env(),
        overrides or {},
    )

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = str(err["loc"][0]) if err.get("loc") else ""
        raise ConfigurationError(
            f"Configuration validation failed for {field!r}: {err.get('msg')}",
            hint=field_spec_hint(field) if field else None,
        ) from e

    config = StatusesConfig(
        strict_parse=settings.strict_parse,
        validate_table=settings.validate_table,
    )
    logger.debug("Resolved configuration: %s", config)
    return config


def _merge_layers(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Merge layers over the schema defaults, later layers winning."""
    out = dict(_default_settings())
    for payload in layers:
        out.update(payload)
    return out
