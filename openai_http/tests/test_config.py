"""Configuration resolution: defaults, environment, overrides."""
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from openai_http.base.dto import ClientSettings
from openai_http.base.logging import get_logger
from openai_http.config import get_client_config
from openai_http.config.env import env_overrides, is_placeholder, resolve_env


def test_defaults():
    cfg = get_client_config()
    assert cfg.access_token is None
    assert cfg.uri_base == "https://api.openai.com/"
    assert cfg.api_version == "v1"
    assert cfg.api_type == "openai"
    assert cfg.request_timeout == 120.0
    assert cfg.extra_headers == {}
    assert not cfg.is_azure


def test_access_token_prefers_canonical(monkeypatch):
    monkeypatch.setenv("OPENAI_ACCESS_TOKEN", "sk-canon")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-alias")
    assert resolve_env("access_token") == ("sk-canon", "OPENAI_ACCESS_TOKEN")


def test_access_token_alias(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-alias")
    assert get_client_config().access_token == "sk-alias"


def test_blank_env_values_are_ignored(monkeypatch):
    monkeypatch.setenv("OPENAI_URI_BASE", "   ")
    assert "uri_base" not in env_overrides()


def test_overrides_beat_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_TYPE", "azure")
    monkeypatch.setenv("OPENAI_API_VERSION", "2024-02-01")
    cfg = get_client_config({"api_version": "2024-06-01"}, access_token="k")
    assert cfg.is_azure
    assert cfg.api_version == "2024-06-01"
    assert cfg.access_token == "k"


def test_none_overrides_do_not_clobber(monkeypatch):
    monkeypatch.setenv("OPENAI_ORGANIZATION_ID", "org-env")
    assert get_client_config(organization_id=None).organization_id == "org-env"


def test_unsupported_api_type_rejected():
    with pytest.raises(ValidationError):
        ClientSettings(api_type="gcp")


def test_request_timeout_from_env(monkeypatch):
    monkeypatch.setenv("OPENAI_REQUEST_TIMEOUT", "15")
    assert ClientSettings().request_timeout == 15.0


def test_settings_are_frozen():
    cfg = ClientSettings()
    with pytest.raises(ValidationError):
        cfg.access_token = "x"


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("sk-example")
    assert is_placeholder("test_token")
    assert not is_placeholder("sk-real")
    assert not is_placeholder(None)


def test_placeholder_token_is_warned_not_rejected(capsys):
    get_logger()
    cfg = get_client_config(access_token="changeme")
    assert cfg.access_token == "changeme"
    lines = capsys.readouterr().err.strip().splitlines()
    data = json.loads(lines[-1])
    assert data["event"] == "config.placeholder_token"
    assert data["level"] == "WARNING"
