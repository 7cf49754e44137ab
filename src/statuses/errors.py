"""Exception hierarchy for statuses."""

from __future__ import annotations

from typing import Any


class StatusesError(Exception):
    """Base exception for all statuses errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnknownStatusCode(StatusesError, LookupError):
    """A numeric lookup found no such status code."""

    def __init__(self, code: Any, *, hint: str | None = None) -> None:
        super().__init__(f"invalid status code: {code}", hint=hint)
        self.code = code


class UnknownStatusMessage(StatusesError, LookupError):
    """A reason-phrase lookup found no such message."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(f'invalid status message: "{message}"', hint=hint)
        self.message = message


class InvalidArgumentType(StatusesError, TypeError):
    """Lookup input was neither a number nor a string."""

    def __init__(self, value: Any, *, hint: str | None = None) -> None:
        super().__init__("code must be a number or string", hint=hint)
        self.value = value


class InvalidCodeTable(StatusesError, ValueError):
    """Strict validation rejected a code table at load time."""

    def __init__(
        self, message: str, *, code: Any = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.code = code


class ConfigurationError(StatusesError):
    """Configuration validation or resolution failed."""
