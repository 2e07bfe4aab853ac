"""Internal validation helpers shared by the outcome families."""

from __future__ import annotations

import typing

from verdict.errors import InvalidArgumentError


def _require(
    *,
    condition: bool,
    message: str,
    field_name: str | None = None,
    hint: str | None = None,
) -> None:
    """Raise ``InvalidArgumentError`` with optional field context."""
    if not condition:
        if field_name:
            raise InvalidArgumentError(f"{field_name}: {message}", hint=hint)
        raise InvalidArgumentError(message, hint=hint)


def _require_present(value: object, field_name: str) -> None:
    _require(condition=value is not None, message="must not be None", field_name=field_name)


def _require_callable(func: typing.Any, field_name: str) -> None:
    """Validate a handler is supplied and callable."""
    _require_present(func, field_name)
    _require(condition=callable(func), message="must be callable", field_name=field_name)
