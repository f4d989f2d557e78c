"""URI joining and header assembly for both deployment modes."""
from __future__ import annotations

import pytest

from openai_http.base.dto import ClientSettings
from openai_http.base.http import build_headers, build_uri, join_url


@pytest.mark.parametrize(
    "segments, expected",
    [
        (("https://api.openai.com/", "v1", "/chat/completions"), "https://api.openai.com/v1/chat/completions"),
        (("https://api.openai.com", "/v1/", "models"), "https://api.openai.com/v1/models"),
        (("https://proxy.local/openai/", "", "/files"), "https://proxy.local/openai/files"),
        (("https://x.test/", None, "a/b/"), "https://x.test/a/b/"),
    ],
)
def test_join_url(segments, expected):
    assert join_url(*segments) == expected


def test_openai_uri_includes_version_segment():
    cfg = ClientSettings(uri_base="https://api.openai.com/", api_version="v1")
    assert build_uri(cfg, "/chat/completions") == "https://api.openai.com/v1/chat/completions"


def test_azure_uri_uses_query_parameter():
    cfg = ClientSettings(
        uri_base="https://res.openai.azure.com/openai/deployments/gpt4",
        api_type="azure",
        api_version="2024-02-01",
    )
    assert build_uri(cfg, "/chat/completions") == (
        "https://res.openai.azure.com/openai/deployments/gpt4/chat/completions?api-version=2024-02-01"
    )


def test_openai_headers():
    cfg = ClientSettings(access_token="sk-abc", organization_id="org-9")
    headers = build_headers(cfg)
    assert headers["content-type"] == "application/json"
    assert headers["authorization"] == "Bearer sk-abc"
    assert headers["openai-organization"] == "org-9"
    assert "api-key" not in headers


def test_openai_headers_without_organization():
    headers = build_headers(ClientSettings(access_token="sk-abc"))
    assert "openai-organization" not in headers


def test_azure_headers_use_api_key():
    headers = build_headers(ClientSettings(access_token="az-key", organization_id="org-9", api_type="Azure"))
    assert headers["api-key"] == "az-key"
    assert "authorization" not in headers
    assert "openai-organization" not in headers


def test_extra_headers_win_case_insensitively():
    cfg = ClientSettings(
        access_token="sk-abc",
        extra_headers={"authorization": "Bearer override", "OpenAI-Beta": "assistants=v2"},
    )
    headers = build_headers(cfg)
    assert headers.get_list("authorization") == ["Bearer override"]
    assert headers["openai-beta"] == "assistants=v2"


def test_missing_token_sends_no_auth_header():
    assert "authorization" not in build_headers(ClientSettings())
