"""Map outcomes to HTTP statuses and response bodies.

Framework-neutral: web handlers turn the ``(status, body)`` pair into their
own response objects. Only ``error.code`` decides the status.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from verdict.codes import ResultCode
from verdict.config import get_config
from verdict.envelope import _require_outcome, to_dict

if TYPE_CHECKING:
    from verdict.outcome import Outcome
    from verdict.result import Result

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[ResultCode, httpx.codes] = {
    ResultCode.SUCCESS: httpx.codes.OK,
    ResultCode.NOT_FOUND: httpx.codes.NOT_FOUND,
    ResultCode.VALIDATION_ERROR: httpx.codes.BAD_REQUEST,
    ResultCode.UNAUTHORIZED: httpx.codes.FORBIDDEN,
    ResultCode.CONFLICT: httpx.codes.CONFLICT,
    ResultCode.INTERNAL_ERROR: httpx.codes.INTERNAL_SERVER_ERROR,
}


def status_for(outcome: Outcome | Result[Any], *, default: int | None = None) -> int:
    """Return the HTTP status for an outcome.

    Successes map to 200. Failures map by well-known code; any other code
    maps to ``default`` when given, else to ``Config.unknown_code_status``.
    """
    _require_outcome(outcome)
    error = outcome.error
    if error is None:
        return int(httpx.codes.OK)

    config = get_config()
    code = error.well_known_code
    if code is None:
        status = default if default is not None else config.unknown_code_status
        logger.debug("Unrecognized error code %r; using status %d", error.code, status)
    else:
        status = int(STATUS_BY_CODE[code])

    if config.log_failures:
        logger.info("Mapped failure to HTTP %d: %s", status, error)
    return status


def to_response(
    outcome: Outcome | Result[Any], *, default: int | None = None
) -> tuple[int, dict[str, Any] | None]:
    """Return ``(status, body)`` for an outcome.

    The body is the serialized envelope, except for ``Unauthorized``
    failures, which are answered as a bare forbid with no body.
    """
    status = status_for(outcome, default=default)
    error = outcome.error
    if error is not None and error.well_known_code is ResultCode.UNAUTHORIZED:
        return status, None
    return status, to_dict(outcome)
