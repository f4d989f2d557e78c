"""Timeout configuration for HTTP requests.

Centralizes the request timeout applied to every ``httpx.Client`` the
request helpers create, so call sites never carry ad-hoc numeric literals.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and again whenever they change. Supported variables:
        OPENAI_REQUEST_TIMEOUT
        OPENAI_CONNECT_TIMEOUT
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

from ..config.defaults import DEFAULT_CONNECT_TIMEOUT_SECONDS, DEFAULT_REQUEST_TIMEOUT_SECONDS


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        request_timeout_seconds: Read/write/pool timeout for a single request.
            For streaming requests this bounds the wait between fragments.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT_SECONDS

    def to_httpx(self, request_timeout: float | None = None) -> httpx.Timeout:
        """Build the ``httpx.Timeout`` for a client, optionally overriding the request timeout."""
        total = request_timeout if request_timeout is not None else self.request_timeout_seconds
        return httpx.Timeout(total, connect=min(self.connect_timeout_seconds, total))


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = "/".join(
        [
            os.getenv("OPENAI_REQUEST_TIMEOUT", ""),
            os.getenv("OPENAI_CONNECT_TIMEOUT", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    _CACHED = TimeoutConfig(
        request_timeout_seconds=_parse_env_float("OPENAI_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS),
        connect_timeout_seconds=_parse_env_float("OPENAI_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT_SECONDS),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
