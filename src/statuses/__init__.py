"""statuses: HTTP status code and reason phrase lookup.

Public API:
    - build_registry(): Build an immutable StatusRegistry from a code table
    - default_registry(): The bundled registry, built once per process
    - StatusRegistry: resolve(), code_for(), message_for(), all_codes(),
      is_redirect(), has_empty_body(), is_retryable()
    - resolve_config(): Resolve parsing/validation options
"""

from __future__ import annotations

import logging

from statuses.codes import CODES, EMPTY_BODY_CODES, REDIRECT_CODES, RETRY_CODES
from statuses.config import StatusesConfig, resolve_config
from statuses.errors import (
    ConfigurationError,
    InvalidArgumentType,
    InvalidCodeTable,
    StatusesError,
    UnknownStatusCode,
    UnknownStatusMessage,
)
from statuses.registry import StatusRegistry, build_registry, default_registry

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("statuses-registry")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("statuses").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Registry
    "StatusRegistry",
    "build_registry",
    "default_registry",
    # Data
    "CODES",
    "REDIRECT_CODES",
    "EMPTY_BODY_CODES",
    "RETRY_CODES",
    # Configuration
    "StatusesConfig",
    "resolve_config",
    # Errors
    "StatusesError",
    "UnknownStatusCode",
    "UnknownStatusMessage",
    "InvalidArgumentType",
    "InvalidCodeTable",
    "ConfigurationError",
]
