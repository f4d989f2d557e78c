"""Pytest configuration for the client test suite.

Clears every environment variable the configuration layer reads so tests do
not pick up a developer's real credentials, and provides small builders for
``httpx.MockTransport`` based requesters.
"""

from __future__ import annotations

from typing import Callable, Iterator, List

import httpx
import pytest

from openai_http.base.dto import ClientSettings
from openai_http.base.http import HTTPRequester
from openai_http.base.streaming import MemoryRecorder
from openai_http.config.env import ENV_MAP

_EXTRA_ENV = ("OPENAI_REQUEST_TIMEOUT", "OPENAI_CONNECT_TIMEOUT", "OPENAI_HTTP_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove client-related environment variables for the duration of a test."""
    for names in ENV_MAP.values():
        for name in names:
            monkeypatch.delenv(name, raising=False)
    for name in _EXTRA_ENV:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def recorder() -> MemoryRecorder:
    return MemoryRecorder()


@pytest.fixture()
def settings() -> ClientSettings:
    return ClientSettings(access_token="sk-live", organization_id="org-1", uri_base="https://api.example.com/")


@pytest.fixture()
def sent() -> List[httpx.Request]:
    """Requests observed by the mock transport, in order."""
    return []


@pytest.fixture()
def make_requester(settings: ClientSettings, sent: List[httpx.Request], recorder: MemoryRecorder):
    """Return a factory building an ``HTTPRequester`` over a mock handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], cfg: ClientSettings | None = None) -> HTTPRequester:
        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        return HTTPRequester(cfg or settings, transport=httpx.MockTransport(_record), recorder=recorder)

    return _make
