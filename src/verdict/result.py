"""Value-bearing outcomes: success with a payload, or failure with an error.

``Result[P]`` is the union of ``Success[P]`` and ``Failure``. Producers build
one with ``success(data)`` / ``failure(error)``, or return a bare value or a
bare ``ErrorInfo`` from a function decorated with ``returns_result``. Callers
branch with ``match``, ``decompose`` or structural pattern matching:

    match find_item(7):
        case Success(item):
            ...
        case Failure(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, ClassVar, overload

from verdict._validation import _require, _require_callable
from verdict.error_info import ErrorInfo, _failure_error
from verdict.errors import InvalidArgumentError
from verdict.outcome import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from verdict.codes import ResultCode

logger = logging.getLogger(__name__)

_USE_SUCCESS_HINT = "Use success(data) to create a successful result."
_NONE_DATA_HINT = (
    "Use UNIT for a success without a meaningful value, "
    "or ok() when the operation never produces one."
)


class Unit(Enum):
    """Explicit payload for a success that carries no meaningful value."""

    UNIT = "UNIT"

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit.UNIT


@dataclass(frozen=True, slots=True)
class Success[P]:
    """A successful result carrying its payload."""

    data: P
    is_success: ClassVar[bool] = True
    error: ClassVar[None] = None

    def __post_init__(self) -> None:
        _require(
            condition=self.data is not None,
            message="must not be None",
            field_name="data",
            hint=_NONE_DATA_HINT,
        )

    def match[R](
        self, on_success: Callable[[P], R], on_failure: Callable[[ErrorInfo], R]
    ) -> R:
        """Invoke ``on_success(data)`` and return its result.

        Both handlers are validated before either runs.
        """
        _require_callable(on_success, "on_success")
        _require_callable(on_failure, "on_failure")
        return on_success(self.data)

    def describe(self) -> str:
        if self.data is UNIT:
            return "Success"
        return f"Success: {self.data}"

    def decompose(self) -> tuple[bool, P | None, ErrorInfo | None]:
        """Return ``(is_success, data, error)``."""
        return True, self.data, None

    def to_outcome(self) -> Ok:
        """Drop the payload, keeping only the success signal."""
        return Ok()

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True)
class Failure:
    """A failed result carrying the reason for the failure."""

    error: ErrorInfo
    is_success: ClassVar[bool] = False
    data: ClassVar[None] = None

    def __post_init__(self) -> None:
        _failure_error(self.error, None, success_hint=_USE_SUCCESS_HINT)

    def match[R](
        self, on_success: Callable[[Any], R], on_failure: Callable[[ErrorInfo], R]
    ) -> R:
        """Invoke ``on_failure(error)`` and return its result.

        Both handlers are validated before either runs.
        """
        _require_callable(on_success, "on_success")
        _require_callable(on_failure, "on_failure")
        return on_failure(self.error)

    def describe(self) -> str:
        return f"Failure: {self.error.to_display_string()}"

    def decompose(self) -> tuple[bool, None, ErrorInfo | None]:
        """Return ``(is_success, data, error)``."""
        return False, None, self.error

    def to_outcome(self) -> Err:
        """Return the value-less failure for the same error."""
        return Err(self.error)

    def __str__(self) -> str:
        return self.describe()


type Result[P] = Success[P] | Failure


def success[P](data: P) -> Success[P]:
    """Create a successful result. ``data`` must not be None."""
    return Success(data)


@overload
def failure(error: ErrorInfo, /) -> Failure: ...


@overload
def failure(code: ResultCode | str, message: str, /) -> Failure: ...


def failure(
    error: ErrorInfo | ResultCode | str, message: str | None = None, /
) -> Failure:
    """Create a failed result.

    Accepts either a ready ``ErrorInfo`` or a code plus a message. The
    ``Success`` code is reserved; building a failure with it raises
    ``InvalidArgumentError``.
    """
    return Failure(_failure_error(error, message, success_hint=_USE_SUCCESS_HINT))


def from_value[P](value: P) -> Success[P]:
    """Treat a bare payload as a successful result."""
    return success(value)


def from_error(error: ErrorInfo) -> Failure:
    """Treat a bare ``ErrorInfo`` as a failed result."""
    return failure(error)


def as_result(value: Any) -> Result[Any]:
    """Coerce a producer's return value into a ``Result``.

    ``Success``/``Failure`` pass through unchanged, a bare ``ErrorInfo``
    becomes ``Failure`` and any other value becomes ``Success``. ``None`` is
    rejected rather than turned into a success.
    """
    if isinstance(value, (Success, Failure)):
        return value
    if isinstance(value, ErrorInfo):
        logger.debug("Coercing bare ErrorInfo to Failure: %s", value)
        return from_error(value)
    if isinstance(value, (Ok, Err)):
        raise InvalidArgumentError(
            f"cannot coerce {type(value).__name__} to a Result",
            hint="Call .with_data(data) to attach a payload explicitly.",
        )
    return from_value(value)


def returns_result[**Params](func: Callable[Params, Any]) -> Callable[Params, Any]:
    """Decorate a producer so its return value is coerced with ``as_result``.

    Works for plain and ``async`` functions.

    Example:
        @returns_result
        def find_item(item_id: int):
            item = store.get(item_id)
            if item is None:
                return ErrorInfo.not_found(f"Item {item_id} not found")
            return item
    """
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def _async_wrapper(
            *args: Params.args, **kwargs: Params.kwargs
        ) -> Result[Any]:
            return as_result(await func(*args, **kwargs))

        return _async_wrapper

    @functools.wraps(func)
    def _wrapper(*args: Params.args, **kwargs: Params.kwargs) -> Result[Any]:
        return as_result(func(*args, **kwargs))

    return _wrapper
