"""Timeout configuration caching and env parsing."""
from __future__ import annotations

import httpx

from openai_http.base.dto import ClientSettings
from openai_http.base.http import build_httpx_client
from openai_http.base.timeouts import get_timeout_config


def test_defaults():
    cfg = get_timeout_config()
    assert cfg.request_timeout_seconds == 120.0
    assert cfg.connect_timeout_seconds == 10.0


def test_env_override_refreshes_cache(monkeypatch):
    first = get_timeout_config()
    monkeypatch.setenv("OPENAI_REQUEST_TIMEOUT", "45")
    second = get_timeout_config()
    assert second is not first
    assert second.request_timeout_seconds == 45.0
    assert get_timeout_config() is second


def test_invalid_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("OPENAI_REQUEST_TIMEOUT", "soon")
    monkeypatch.setenv("OPENAI_CONNECT_TIMEOUT", "-3")
    cfg = get_timeout_config()
    assert cfg.request_timeout_seconds == 120.0
    assert cfg.connect_timeout_seconds == 10.0


def test_connect_timeout_capped_by_request_timeout():
    timeout = get_timeout_config().to_httpx(5.0)
    assert timeout.read == 5.0
    assert timeout.connect == 5.0


def test_client_uses_settings_timeout():
    with build_httpx_client(ClientSettings(request_timeout=7.5)) as client:
        assert isinstance(client.timeout, httpx.Timeout)
        assert client.timeout.read == 7.5
