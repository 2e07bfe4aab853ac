"""Well-known failure codes."""

from __future__ import annotations

from enum import Enum


class ResultCode(str, Enum):
    """Closed set of symbolic outcome categories.

    The member value is the wire code carried by ``ErrorInfo.code`` and is
    what the boundary status mapping keys on.
    """

    SUCCESS = "Success"
    NOT_FOUND = "NotFound"
    VALIDATION_ERROR = "ValidationError"
    UNAUTHORIZED = "Unauthorized"
    CONFLICT = "Conflict"
    INTERNAL_ERROR = "InternalError"

    @classmethod
    def parse(cls, code: str) -> ResultCode | None:
        """Return the member whose wire code is ``code``, or None."""
        try:
            return cls(code)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value
