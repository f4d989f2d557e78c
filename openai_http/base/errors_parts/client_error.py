"""
Structured client error exception type.

Raised for usage errors detected before a request is sent (for example an
invalid stream handler). Transport failures are not wrapped; they propagate
as the underlying ``httpx`` exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ClientError(Exception):
    """Represents a structured client error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        endpoint: Request path the error relates to, when known.
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    endpoint: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining endpoint, code, and message."""
        return f"{self.endpoint or '-'} {self.code.value}: {self.message}"


__all__ = ["ClientError"]
