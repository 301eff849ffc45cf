"""Custom exceptions for boundary-cancel.

Every failure the action reports carries one of two kinds:

Retryable (framework may re-run the whole invocation):
    - Rate limiting (HTTP 429)
    - Controller server errors (HTTP 5xx)

Fatal (re-running would fail the same way):
    - Invalid input parameters
    - Missing secrets or base URL
    - Bad credentials, expired token
    - Missing session, version conflict
    - Malformed responses, unexpected exceptions

Usage:
    from boundary_cancel.exceptions import ActionError, ErrorKind
"""

from __future__ import annotations

__all__ = [
    "ActionError",
    "ErrorKind",
    "fatal_error",
    "retryable_error",
]

from enum import Enum


class ErrorKind(str, Enum):
    """Classification the invoking framework uses to decide on retries."""

    RETRYABLE = "retryable"
    FATAL = "fatal"


class ActionError(Exception):
    """Raised for every classified failure of the cancel action.

    Attributes:
        kind: Retryable or fatal classification.
        message: Human-readable failure description.
    """

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.FATAL) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    @property
    def retryable(self) -> bool:
        """True if the framework may retry the invocation."""
        return self.kind is ErrorKind.RETRYABLE

    def __repr__(self) -> str:
        return f"ActionError({self.message!r}, kind={self.kind.value!r})"

    def __str__(self) -> str:
        return self.message


def fatal_error(message: str) -> ActionError:
    """Build a fatal error."""
    return ActionError(message, ErrorKind.FATAL)


def retryable_error(message: str) -> ActionError:
    """Build a retryable error."""
    return ActionError(message, ErrorKind.RETRYABLE)
