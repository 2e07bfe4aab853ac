"""Verdict: explicit success/failure outcomes instead of exceptions or None.

Public API:
    - Outcome (Ok | Err), ok(), err(): value-less outcomes
    - Result (Success | Failure), success(), failure(): value-bearing outcomes
    - ErrorInfo, ResultCode: failure reasons
    - to_json()/from_json(): wire envelope
    - status_for()/to_response(): HTTP boundary mapping
"""

from __future__ import annotations

import logging

from verdict.codes import ResultCode
from verdict.config import Config, config_scope, get_config, set_config
from verdict.envelope import (
    Envelope,
    ErrorPayload,
    from_dict,
    from_json,
    to_dict,
    to_envelope,
    to_json,
)
from verdict.error_info import ErrorInfo
from verdict.errors import (
    ConfigurationError,
    EnvelopeError,
    InvalidArgumentError,
    VerdictError,
)
from verdict.http import status_for, to_response
from verdict.outcome import Err, Ok, Outcome, as_outcome, err, ok, returns_outcome
from verdict.result import (
    UNIT,
    Failure,
    Result,
    Success,
    Unit,
    as_result,
    failure,
    from_error,
    from_value,
    returns_result,
    success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("verdict")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("verdict").addHandler(logging.NullHandler())

__all__ = [
    "UNIT",
    "Config",
    "ConfigurationError",
    "Envelope",
    "EnvelopeError",
    "Err",
    "ErrorInfo",
    "ErrorPayload",
    "Failure",
    "InvalidArgumentError",
    "Ok",
    "Outcome",
    "Result",
    "ResultCode",
    "Success",
    "Unit",
    "VerdictError",
    "as_outcome",
    "as_result",
    "config_scope",
    "err",
    "failure",
    "from_dict",
    "from_error",
    "from_json",
    "from_value",
    "get_config",
    "ok",
    "returns_outcome",
    "returns_result",
    "set_config",
    "status_for",
    "success",
    "to_dict",
    "to_envelope",
    "to_json",
    "to_response",
]
