from __future__ import annotations

import pytest

from verdict.errors import (
    ConfigurationError,
    EnvelopeError,
    InvalidArgumentError,
    VerdictError,
)

pytestmark = pytest.mark.unit


def test_verdict_error_carries_hint() -> None:
    err = VerdictError("boom", hint="do this")

    assert str(err) == "boom"
    assert err.hint == "do this"


def test_hint_defaults_to_none() -> None:
    assert InvalidArgumentError("fail").hint is None


def test_subclass_hierarchy() -> None:
    """All errors are catchable as VerdictError; argument errors also as ValueError."""
    assert issubclass(InvalidArgumentError, VerdictError)
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(ConfigurationError, VerdictError)
    assert issubclass(EnvelopeError, VerdictError)
    assert not issubclass(ConfigurationError, ValueError)
