"""OpenAIClient facade and endpoint groups."""
from __future__ import annotations

import json
from typing import List

import httpx
import pytest

from openai_http import ClientSettings, MemoryRecorder, OpenAIClient


@pytest.fixture()
def client_and_requests():
    sent: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200, json={"path": request.url.path})

    client = OpenAIClient(
        ClientSettings(access_token="sk-live"),
        transport=httpx.MockTransport(handler),
        recorder=MemoryRecorder(),
    )
    return client, sent


@pytest.mark.parametrize(
    "call, method, path",
    [
        (lambda c: c.chat({"model": "m"}), "POST", "/v1/chat/completions"),
        (lambda c: c.completions({"model": "m"}), "POST", "/v1/completions"),
        (lambda c: c.embeddings({"input": "x"}), "POST", "/v1/embeddings"),
        (lambda c: c.moderations({"input": "x"}), "POST", "/v1/moderations"),
        (lambda c: c.models.list(), "GET", "/v1/models"),
        (lambda c: c.models.retrieve("gpt-4o"), "GET", "/v1/models/gpt-4o"),
        (lambda c: c.files.list(), "GET", "/v1/files"),
        (lambda c: c.files.retrieve("file-1"), "GET", "/v1/files/file-1"),
        (lambda c: c.files.content("file-1"), "GET", "/v1/files/file-1/content"),
        (lambda c: c.files.delete("file-1"), "DELETE", "/v1/files/file-1"),
        (lambda c: c.images.generate({"prompt": "cat"}), "POST", "/v1/images/generations"),
    ],
)
def test_endpoint_routing(client_and_requests, call, method, path):
    client, sent = client_and_requests
    assert call(client) == {"path": path}
    assert sent[0].method == method
    assert sent[0].url.path == path


def test_files_upload_opens_path(client_and_requests, tmp_path):
    client, sent = client_and_requests
    source = tmp_path / "train.jsonl"
    source.write_bytes(b'{"prompt": "a"}\n')
    client.files.upload({"file": str(source), "purpose": "fine-tune"})
    assert b'filename="train.jsonl"' in sent[0].content
    assert b'{"prompt": "a"}' in sent[0].content


def test_chat_streaming_through_client():
    body = b'data: {"choices": [{"delta": {"content": "ok"}}]}\n\n'
    client = OpenAIClient(
        ClientSettings(access_token="sk-live"),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, content=iter([body]))),
        recorder=MemoryRecorder(),
    )
    chunks = []
    with client:
        result = client.chat({"model": "m", "stream": chunks.append})
    assert chunks[0]["choices"][0]["delta"]["content"] == "ok"
    assert result == {"usage": {"completion_token": 1}}


def test_settings_from_overrides_and_env(monkeypatch):
    monkeypatch.setenv("OPENAI_ACCESS_TOKEN", "sk-env")
    monkeypatch.setenv("OPENAI_ORGANIZATION_ID", "org-env")
    client = OpenAIClient(uri_base="https://gateway.test/", organization_id=None)
    assert client.settings.access_token == "sk-env"
    assert client.settings.organization_id == "org-env"
    assert client.http.uri("/models") == "https://gateway.test/v1/models"


def test_settings_and_overrides_are_exclusive():
    with pytest.raises(TypeError):
        OpenAIClient(ClientSettings(), access_token="sk")


def test_request_body_is_json(client_and_requests):
    client, sent = client_and_requests
    client.embeddings({"input": ["a", "b"], "model": "text-embedding-3-small"})
    assert json.loads(sent[0].content)["input"] == ["a", "b"]


def test_images_edit_without_files_is_multipart(client_and_requests):
    client, sent = client_and_requests
    assert client.images.edit({"prompt": "a cat", "n": 1}) == {"path": "/v1/images/edits"}
    request = sent[0]
    assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
    assert b'name="prompt"\r\n\r\na cat\r\n' in request.content
    assert b'name="n"\r\n\r\n1\r\n' in request.content
    assert b"filename=" not in request.content
