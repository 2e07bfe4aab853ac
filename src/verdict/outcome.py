"""Value-less outcomes: an operation either succeeded or failed with an error.

``Outcome`` is the union of two frozen variants, ``Ok`` and ``Err``. Only the
``Err`` variant carries an ``ErrorInfo``, so "both" or "neither" cannot be
represented. Use ``verdict.result`` when success also produces a value.
"""

from __future__ import annotations

from dataclasses import dataclass
import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, ClassVar, overload

from verdict._validation import _require_callable
from verdict.error_info import ErrorInfo, _failure_error
from verdict.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

    from verdict.codes import ResultCode
    from verdict.result import Failure, Result, Success

logger = logging.getLogger(__name__)

_USE_OK_HINT = "Use ok() to create a successful outcome."


@dataclass(frozen=True, slots=True)
class Ok:
    """A successful outcome with no payload."""

    is_success: ClassVar[bool] = True
    error: ClassVar[None] = None

    def match[R](
        self, on_success: Callable[[], R], on_failure: Callable[[ErrorInfo], R]
    ) -> R:
        """Invoke ``on_success()`` and return its result."""
        _require_callable(on_success, "on_success")
        _require_callable(on_failure, "on_failure")
        return on_success()

    def describe(self) -> str:
        return "Success"

    def decompose(self) -> tuple[bool, ErrorInfo | None]:
        """Return ``(is_success, error)``."""
        return True, None

    def with_data[P](self, data: P) -> Result[P]:
        """Attach a payload, producing a value-bearing success."""
        from verdict.result import success

        return success(data)

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True)
class Err:
    """A failed outcome carrying the reason for the failure."""

    error: ErrorInfo
    is_success: ClassVar[bool] = False

    def __post_init__(self) -> None:
        _failure_error(self.error, None, success_hint=_USE_OK_HINT)

    def match[R](
        self, on_success: Callable[[], R], on_failure: Callable[[ErrorInfo], R]
    ) -> R:
        """Invoke ``on_failure(error)`` and return its result."""
        _require_callable(on_success, "on_success")
        _require_callable(on_failure, "on_failure")
        return on_failure(self.error)

    def describe(self) -> str:
        return f"Failure: {self.error.to_display_string()}"

    def decompose(self) -> tuple[bool, ErrorInfo | None]:
        """Return ``(is_success, error)``."""
        return False, self.error

    def with_data(self, data: object) -> Result[Any]:
        """Return the value-bearing failure for the same error; ``data`` is ignored."""
        from verdict.result import Failure

        del data
        return Failure(self.error)

    def __str__(self) -> str:
        return self.describe()


type Outcome = Ok | Err


def ok() -> Ok:
    """Create a successful value-less outcome."""
    return Ok()


@overload
def err(error: ErrorInfo, /) -> Err: ...


@overload
def err(code: ResultCode | str, message: str, /) -> Err: ...


def err(error: ErrorInfo | ResultCode | str, message: str | None = None, /) -> Err:
    """Create a failed value-less outcome.

    Accepts either a ready ``ErrorInfo`` or a code plus a message. The
    ``Success`` code is reserved; building a failure with it raises
    ``InvalidArgumentError``.
    """
    return Err(_failure_error(error, message, success_hint=_USE_OK_HINT))


def as_outcome(value: Ok | Err | ErrorInfo | Success[Any] | Failure | None) -> Outcome:
    """Coerce a producer's return value into an ``Outcome``.

    ``Ok``/``Err`` pass through, a bare ``ErrorInfo`` becomes ``Err`` and
    ``None`` (a plain return) becomes ``Ok``. A ``Result`` is an outcome too:
    its payload is dropped. Anything else is rejected.
    """
    if isinstance(value, (Ok, Err)):
        return value
    if isinstance(value, ErrorInfo):
        logger.debug("Coercing bare ErrorInfo to Err: %s", value)
        return Err(value)
    if value is None:
        return Ok()

    from verdict.result import Failure, Success

    if isinstance(value, (Success, Failure)):
        logger.debug("Converting %s to a value-less Outcome", value)
        return value.to_outcome()
    raise InvalidArgumentError(
        f"cannot coerce {type(value).__name__} to an Outcome",
        hint="Return None, an ErrorInfo, an Outcome or a Result.",
    )


def returns_outcome[**Params](func: Callable[Params, Any]) -> Callable[Params, Any]:
    """Decorate a producer so its return value is coerced with ``as_outcome``.

    Works for plain and ``async`` functions.

    Example:
        @returns_outcome
        def delete_item(item_id: int):
            if item_id not in store:
                return ErrorInfo.not_found(f"Item {item_id} not found")
            del store[item_id]
    """
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def _async_wrapper(*args: Params.args, **kwargs: Params.kwargs) -> Outcome:
            return as_outcome(await func(*args, **kwargs))

        return _async_wrapper

    @functools.wraps(func)
    def _wrapper(*args: Params.args, **kwargs: Params.kwargs) -> Outcome:
        return as_outcome(func(*args, **kwargs))

    return _wrapper
