"""Wire shape for outcomes.

Every outcome serializes to the same envelope, whichever family it belongs
to::

    {"data": <payload or null>, "error": {"code": str, "message": str} or null,
     "isSuccess": bool}

Decoding always yields a value-bearing ``Result``; call ``.to_outcome()`` on
it when the payload is irrelevant.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic_core import PydanticSerializationError

from verdict.error_info import ErrorInfo
from verdict.errors import EnvelopeError, InvalidArgumentError
from verdict.outcome import Err, Ok
from verdict.result import UNIT, Failure, Success, failure, success

if TYPE_CHECKING:
    from verdict.outcome import Outcome
    from verdict.result import Result

logger = logging.getLogger(__name__)

_VARIANTS = (Ok, Err, Success, Failure)


class ErrorPayload(BaseModel):
    """Serialized ``ErrorInfo``."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str


class Envelope[P](BaseModel):
    """Serialized outcome.

    The model validator enforces the same success/failure invariant as the
    in-memory variants, so a decoded envelope always maps to exactly one of
    ``Success`` or ``Failure``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    data: P | None = None
    error: ErrorPayload | None = None
    is_success: bool = Field(alias="isSuccess")

    @model_validator(mode="after")
    def validate_variant(self) -> Envelope[P]:
        """Reject envelopes that are both or neither success and failure."""
        if self.is_success and self.error is not None:
            raise ValueError("a successful envelope must not carry an error")
        if not self.is_success:
            if self.error is None:
                raise ValueError("a failed envelope must carry an error")
            if self.data is not None:
                raise ValueError("a failed envelope must not carry data")
        return self


def _require_outcome(value: object) -> None:
    if not isinstance(value, _VARIANTS):
        raise InvalidArgumentError(
            f"expected an Outcome or Result, got {type(value).__name__}",
            hint="Build one with ok()/err() or success()/failure().",
        )


def to_envelope(outcome: Outcome | Result[Any]) -> Envelope[Any]:
    """Build the envelope model for either outcome family."""
    _require_outcome(outcome)
    data: Any = None
    if isinstance(outcome, Success) and outcome.data is not UNIT:
        data = outcome.data
    error = outcome.error
    return Envelope[Any](
        data=data,
        error=None if error is None else ErrorPayload(code=error.code, message=error.message),
        is_success=outcome.is_success,
    )


def to_dict(outcome: Outcome | Result[Any]) -> dict[str, Any]:
    """Return the JSON-compatible envelope dict, keyed as on the wire."""
    envelope = to_envelope(outcome)
    try:
        return envelope.model_dump(mode="json", by_alias=True)
    except PydanticSerializationError as exc:
        raise _unserializable(envelope, exc) from exc


def to_json(outcome: Outcome | Result[Any], *, indent: int | None = None) -> str:
    """Serialize an outcome. Compact unless ``indent`` is given."""
    envelope = to_envelope(outcome)
    try:
        return envelope.model_dump_json(by_alias=True, indent=indent)
    except PydanticSerializationError as exc:
        raise _unserializable(envelope, exc) from exc


def _unserializable(envelope: Envelope[Any], exc: PydanticSerializationError) -> EnvelopeError:
    logger.debug("Cannot serialize outcome payload: %s", exc)
    return EnvelopeError(
        f"cannot serialize payload of type {type(envelope.data).__name__}",
        hint="Use JSON-compatible data, a dataclass or a pydantic model as the payload.",
    )


def from_dict(obj: Any, payload_type: Any = Any) -> Result[Any]:
    """Decode an envelope dict, validating the payload against ``payload_type``."""
    try:
        envelope = Envelope[payload_type].model_validate(obj)
    except ValidationError as exc:
        logger.debug("Rejected outcome envelope: %s", exc)
        raise EnvelopeError(
            f"invalid outcome envelope: {exc.error_count()} validation error(s)",
            hint="Expected keys 'data', 'error' and 'isSuccess'.",
        ) from exc
    return _to_result(envelope)


def from_json(text: str | bytes, payload_type: Any = Any) -> Result[Any]:
    """Decode a JSON envelope, validating the payload against ``payload_type``."""
    try:
        envelope = Envelope[payload_type].model_validate_json(text)
    except ValidationError as exc:
        logger.debug("Rejected outcome envelope: %s", exc)
        raise EnvelopeError(
            f"invalid outcome envelope: {exc.error_count()} validation error(s)",
            hint="Expected a JSON object with 'data', 'error' and 'isSuccess'.",
        ) from exc
    return _to_result(envelope)


def _to_result(envelope: Envelope[Any]) -> Result[Any]:
    if envelope.is_success:
        return success(UNIT if envelope.data is None else envelope.data)
    error = envelope.error
    assert error is not None  # guaranteed by Envelope.validate_variant
    return failure(ErrorInfo(error.code, error.message))
