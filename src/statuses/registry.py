"""Status registry: bidirectional code/phrase lookup and classification.

A ``StatusRegistry`` is an immutable value built once from a code table.
Every query is a dictionary or set lookup against structures derived at
construction time, so a registry can be shared freely between callers.

Example:
    registry = build_registry()
    registry.resolve(404)          # "Not Found"
    registry.resolve("not found")  # 404
    registry.is_retryable(503)     # True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cache
import logging
import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, overload

from statuses.codes import CODES, EMPTY_BODY_CODES, REDIRECT_CODES, RETRY_CODES
from statuses.config import StatusesConfig, resolve_config
from statuses.errors import (
    InvalidArgumentType,
    InvalidCodeTable,
    UnknownStatusCode,
    UnknownStatusMessage,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Leading-prefix integer parse: "404", " 404", "+404", "404abc", "404 Not Found".
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
# Whole-string integer parse used when strict_parse is enabled.
_WHOLE_INT = re.compile(r"\s*([+-]?[0-9]+)\s*")


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a status code.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_code(text: str, *, strict: bool) -> int | None:
    """Return the integer a string denotes, or None when it is not numeric."""
    m = _WHOLE_INT.fullmatch(text) if strict else _LEADING_INT.match(text)
    if m is None:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # Digit run longer than the interpreter's int conversion limit.
        raise UnknownStatusCode(m.group(1)) from None


@dataclass(frozen=True, eq=False)
class StatusRegistry:
    """Immutable lookup tables for HTTP status codes.

    Build instances with ``build_registry`` rather than directly; the
    constructor does not derive or check the auxiliary structures.
    """

    #: code -> reason phrase (read-only)
    messages: Mapping[int, str] = field(repr=False)
    #: lower-cased reason phrase -> code (read-only)
    codes_by_message: Mapping[str, int] = field(repr=False)
    #: every known code, in table order
    codes: tuple[int, ...] = field(repr=False)
    redirect_codes: frozenset[int] = REDIRECT_CODES
    empty_body_codes: frozenset[int] = EMPTY_BODY_CODES
    retry_codes: frozenset[int] = RETRY_CODES
    strict_parse: bool = False

    @overload
    def resolve(self, value: int | float) -> str: ...

    @overload
    def resolve(self, value: str) -> int | str: ...

    def resolve(self, value: Any) -> int | str:
        """Resolve a code to its phrase, or a phrase to its code.

        Numbers are looked up as codes. Strings that parse as an integer are
        looked up as codes too; any other string is looked up as a reason
        phrase, case-insensitively.

        Raises:
            UnknownStatusCode: The (parsed) number is not a known code.
            UnknownStatusMessage: The string is not a known reason phrase.
            InvalidArgumentType: ``value`` is neither a number nor a string.
        """
        if _is_number(value):
            return self.message_for(value)

        if not isinstance(value, str):
            raise InvalidArgumentType(value)

        code = _parse_code(value, strict=self.strict_parse)
        if code is not None:
            return self.message_for(code)

        return self.code_for(value)

    def code_for(self, message: str) -> int:
        """Return the code for a reason phrase, ignoring case."""
        if not isinstance(message, str):
            raise InvalidArgumentType(message)
        try:
            return self.codes_by_message[message.lower()]
        except KeyError:
            raise UnknownStatusMessage(message) from None

    def message_for(self, code: int | float) -> str:
        """Return the reason phrase for a status code."""
        if not _is_number(code):
            raise InvalidArgumentType(code)
        try:
            return self.messages[code]  # type: ignore[index]
        except KeyError:
            raise UnknownStatusCode(code) from None

    def all_codes(self) -> tuple[int, ...]:
        """Return every known code, in table order."""
        return self.codes

    def is_redirect(self, code: object) -> bool:
        """Return True if the code asks the client to fetch another resource."""
        return _is_number(code) and code in self.redirect_codes

    def has_empty_body(self, code: object) -> bool:
        """Return True if responses with this code carry no body."""
        return _is_number(code) and code in self.empty_body_codes

    def is_retryable(self, code: object) -> bool:
        """Return True if the request may succeed when retried later."""
        return _is_number(code) and code in self.retry_codes

    def __contains__(self, code: object) -> bool:
        return _is_number(code) and code in self.messages

    def __len__(self) -> int:
        return len(self.codes)


def _validate_table(code_table: Mapping[Any, Any]) -> None:
    """Reject non-integer codes, blank phrases and colliding phrases."""
    seen: dict[str, Any] = {}
    for code, phrase in code_table.items():
        if not isinstance(code, int) or isinstance(code, bool):
            raise InvalidCodeTable(
                f"status code keys must be integers, got {code!r}", code=code
            )
        if not isinstance(phrase, str) or not phrase.strip():
            raise InvalidCodeTable(
                f"status code {code} has an empty or non-string reason phrase",
                code=code,
            )
        key = phrase.lower()
        if key in seen:
            raise InvalidCodeTable(
                f'reason phrase "{phrase}" is used by both {seen[key]} and {code}',
                code=code,
                hint="Reason phrases must be unique, ignoring case.",
            )
        seen[key] = code


def build_registry(
    code_table: Mapping[int, str] | None = None,
    *,
    config: StatusesConfig | None = None,
) -> StatusRegistry:
    """Build an immutable registry from a code table.

    Args:
        code_table: Mapping of status code to reason phrase. Defaults to the
            bundled ``CODES``.
        config: Parsing and validation options. Defaults to
            ``StatusesConfig()``; the environment is never consulted here.

    Raises:
        InvalidCodeTable: ``config.validate_table`` is set and the table is
            malformed.
    """
    table = CODES if code_table is None else code_table
    cfg = config if config is not None else StatusesConfig()

    if cfg.validate_table:
        _validate_table(table)

    messages = dict(table)
    index: dict[str, int] = {}
    for code, phrase in messages.items():
        key = phrase.lower()
        previous = index.get(key)
        if previous is not None and previous != code:
            logger.warning(
                "Reason phrase %r maps to both %s and %s; keeping %s",
                phrase,
                previous,
                code,
                code,
            )
        index[key] = code

    registry = StatusRegistry(
        messages=MappingProxyType(messages),
        codes_by_message=MappingProxyType(index),
        codes=tuple(messages),
        strict_parse=cfg.strict_parse,
    )
    logger.debug(
        "Built status registry with %d codes (strict_parse=%s)",
        len(registry.codes),
        cfg.strict_parse,
    )
    return registry


@cache
def default_registry() -> StatusRegistry:
    """Return the registry for the bundled table, built once per process.

    Configuration is resolved from the environment and TOML files on the
    first call only.
    """
    return build_registry(config=resolve_config())
