from __future__ import annotations

import pytest

from statuses.errors import (
    ConfigurationError,
    InvalidArgumentType,
    InvalidCodeTable,
    StatusesError,
    UnknownStatusCode,
    UnknownStatusMessage,
)

pytestmark = pytest.mark.unit


def test_messages_are_exact() -> None:
    assert str(UnknownStatusCode(999)) == "invalid status code: 999"
    assert str(UnknownStatusMessage("Nope")) == 'invalid status message: "Nope"'
    assert str(InvalidArgumentType({})) == "code must be a number or string"


def test_hint_is_kept_out_of_message() -> None:
    err = UnknownStatusCode(999, hint="Check the code table.")

    assert str(err) == "invalid status code: 999"
    assert err.hint == "Check the code table."


def test_errors_default_hint_to_none() -> None:
    assert StatusesError("fail").hint is None
    assert UnknownStatusMessage("x").hint is None


def test_subclass_hierarchy() -> None:
    """Every error is catchable as StatusesError and as the matching builtin."""
    cases = [
        (UnknownStatusCode(1), LookupError),
        (UnknownStatusMessage("x"), LookupError),
        (InvalidArgumentType(None), TypeError),
        (InvalidCodeTable("bad"), ValueError),
        (ConfigurationError("bad"), StatusesError),
    ]
    for err, builtin in cases:
        assert isinstance(err, StatusesError)
        assert isinstance(err, builtin)
