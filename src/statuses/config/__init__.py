# src/statuses/config/__init__.py

"""Configuration management for statuses.

Configuration is resolved once from defaults, TOML files and ``STATUSES_*``
environment variables into an immutable ``StatusesConfig``.

Key exports:
- resolve_config: Main API for configuration resolution
- StatusesConfig: Immutable configuration payload
- Settings: Pydantic schema for validation and defaults
"""

from .core import Settings, StatusesConfig, resolve_config
from .utils import field_spec_hint

__all__ = [
    "Settings",
    "StatusesConfig",
    "field_spec_hint",
    "resolve_config",
]
