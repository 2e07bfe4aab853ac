"""ErrorInfo: the value describing why an operation failed."""

from __future__ import annotations

from dataclasses import dataclass

from verdict._validation import _require
from verdict.codes import ResultCode


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    """A failure reason: a stable machine-readable code and a message.

    ``code`` may be given as a plain string or a ``ResultCode``; the latter is
    stored as its wire string so that equality and hashing do not depend on
    how the error was built.

    Example:
        ErrorInfo("NotFound", "Item 7 not found")
        ErrorInfo.from_code(ResultCode.NOT_FOUND, "Item 7 not found")
    """

    code: str
    message: str

    def __post_init__(self) -> None:
        """Normalize the code and reject absent fields."""
        _require(
            condition=isinstance(self.code, str),
            message=f"must be a str or ResultCode, got {type(self.code).__name__}",
            field_name="code",
        )
        _require(
            condition=self.message is not None,
            message="must not be None",
            field_name="message",
        )
        _require(
            condition=isinstance(self.message, str),
            message=f"must be a str, got {type(self.message).__name__}",
            field_name="message",
        )
        if isinstance(self.code, ResultCode):
            object.__setattr__(self, "code", self.code.value)

    @classmethod
    def from_code(cls, code: ResultCode, message: str) -> ErrorInfo:
        """Create an ErrorInfo from a well-known code."""
        _require(
            condition=isinstance(code, ResultCode),
            message=f"must be a ResultCode, got {type(code).__name__}",
            field_name="code",
        )
        return cls(code.value, message)

    @classmethod
    def not_found(cls, message: str) -> ErrorInfo:
        return cls.from_code(ResultCode.NOT_FOUND, message)

    @classmethod
    def validation(cls, message: str) -> ErrorInfo:
        return cls.from_code(ResultCode.VALIDATION_ERROR, message)

    @classmethod
    def unauthorized(cls, message: str) -> ErrorInfo:
        return cls.from_code(ResultCode.UNAUTHORIZED, message)

    @classmethod
    def conflict(cls, message: str) -> ErrorInfo:
        return cls.from_code(ResultCode.CONFLICT, message)

    @classmethod
    def internal(cls, message: str) -> ErrorInfo:
        return cls.from_code(ResultCode.INTERNAL_ERROR, message)

    @property
    def well_known_code(self) -> ResultCode | None:
        """The matching ``ResultCode``, or None for custom codes."""
        return ResultCode.parse(self.code)

    def to_display_string(self) -> str:
        """Return ``"<code>: <message>"``."""
        return f"{self.code}: {self.message}"

    def __str__(self) -> str:
        return self.to_display_string()


def _failure_error(
    error: ErrorInfo | ResultCode | str | None,
    message: str | None,
    *,
    success_hint: str,
) -> ErrorInfo:
    """Resolve the ``failure(error)`` / ``failure(code, message)`` call forms."""
    if message is None:
        _require(
            condition=error is not None,
            message="must not be None",
            field_name="error",
        )
        _require(
            condition=not isinstance(error, str),
            message="must not be None",
            field_name="message",
            hint="A code needs a message; pass both, or pass an ErrorInfo.",
        )
        _require(
            condition=isinstance(error, ErrorInfo),
            message=f"must be an ErrorInfo, got {type(error).__name__}",
            field_name="error",
            hint="Pass an ErrorInfo, or a code together with a message.",
        )
        return error  # type: ignore[return-value]

    _require(
        condition=isinstance(error, str),
        message=f"must be a ResultCode or str, got {type(error).__name__}",
        field_name="code",
    )
    info = ErrorInfo(error, message)  # type: ignore[arg-type]
    _require(
        condition=info.well_known_code is not ResultCode.SUCCESS,
        message="'Success' is reserved and cannot describe a failure",
        field_name="code",
        hint=success_hint,
    )
    return info
