"""Exception hierarchy for Verdict.

Exceptions here signal programming errors (contract violations) only.
Expected, modeled failures travel as values inside ``Err``/``Failure``.
"""

from __future__ import annotations


class VerdictError(Exception):
    """Base exception for all Verdict errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidArgumentError(VerdictError, ValueError):
    """A constructor or method precondition was violated.

    Raised for absent required arguments (no error for a failure, no data for
    a success, missing ``match`` handlers) and for reserved codes.
    """


class ConfigurationError(VerdictError):
    """Configuration validation or resolution failed."""


class EnvelopeError(VerdictError):
    """An outcome could not be encoded to, or decoded from, its envelope."""
