"""Client facade over :class:`HTTPRequester`.

``OpenAIClient`` resolves :class:`ClientSettings` (explicit object, or
defaults + environment + keyword overrides via :func:`get_client_config`)
and exposes the common endpoints. Streaming works on any JSON endpoint by
passing a callable as ``parameters["stream"]``::

    client = OpenAIClient(access_token="sk-...")
    client.chat({
        "model": "gpt-4o-mini",
        "messages": [{"role": "user", "content": "hi"}],
        "stream": lambda chunk: print(chunk["choices"][0]["delta"]),
    })
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from .base.dto import ClientSettings
from .base.http import HTTPRequester
from .base.streaming import StreamRecorder
from .config import get_client_config
from .resources import Files, Images, Models


class OpenAIClient:
    """Synchronous client for OpenAI-style REST APIs.

    Args:
        settings: Fully specified settings; when given, ``overrides`` must be empty.
        transport: Optional ``httpx`` transport (e.g. ``httpx.MockTransport``).
        recorder: Optional sink for dropped stream fragment diagnostics.
        **overrides: ``ClientSettings`` fields applied over environment values.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        recorder: Optional[StreamRecorder] = None,
        **overrides: Any,
    ) -> None:
        if settings is not None and overrides:
            raise TypeError("pass either settings or keyword overrides, not both")
        self.settings = settings if settings is not None else get_client_config(overrides)
        self.http = HTTPRequester(self.settings, transport=transport, recorder=recorder)
        self.models = Models(self.http)
        self.files = Files(self.http)
        self.images = Images(self.http)

    def chat(self, parameters: Mapping[str, Any]) -> Any:
        return self.http.json_post("/chat/completions", parameters)

    def completions(self, parameters: Mapping[str, Any]) -> Any:
        return self.http.json_post("/completions", parameters)

    def embeddings(self, parameters: Mapping[str, Any]) -> Any:
        return self.http.json_post("/embeddings", parameters)

    def moderations(self, parameters: Mapping[str, Any]) -> Any:
        return self.http.json_post("/moderations", parameters)

    def __enter__(self) -> "OpenAIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # Requests own short-lived httpx clients; nothing to release.
        return None


__all__ = ["OpenAIClient"]
