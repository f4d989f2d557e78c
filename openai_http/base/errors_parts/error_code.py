"""
Normalized client error codes (taxonomy).

Every member is produced by :func:`classify_exception` (or raised directly as
``ClientError(VALIDATION)``) and lands in the ``error_code`` field of the
``http.transport_error`` log event together with its ``retryable`` hint.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Failure categories for requests against the API."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    CONNECTION = "connection"
    UNKNOWN = "unknown"

    @property
    def retryable(self) -> bool:
        """Whether resending the same request may succeed."""
        return self in _RETRYABLE


_RETRYABLE = frozenset(
    {
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.TRANSIENT,
        ErrorCode.SERVER_ERROR,
        ErrorCode.UNAVAILABLE,
        ErrorCode.CONNECTION,
    }
)


__all__ = ["ErrorCode"]
