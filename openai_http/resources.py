"""Endpoint groups exposed as attributes of :class:`~openai_http.client.OpenAIClient`.

Each method is a single call into :class:`HTTPRequester`; no endpoint here
orchestrates more than one request.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .base.http import HTTPRequester


class Models:
    """``/models`` endpoints."""

    def __init__(self, requester: HTTPRequester) -> None:
        self._requester = requester

    def list(self) -> Any:
        return self._requester.get("/models")

    def retrieve(self, model_id: str) -> Any:
        return self._requester.get(f"/models/{model_id}")


class Files:
    """``/files`` endpoints.

    ``upload`` accepts either an open binary file or a filesystem path under
    ``parameters["file"]``; a path is opened for the duration of the request.
    """

    def __init__(self, requester: HTTPRequester) -> None:
        self._requester = requester

    def list(self) -> Any:
        return self._requester.get("/files")

    def upload(self, parameters: Mapping[str, Any]) -> Any:
        params: Dict[str, Any] = dict(parameters)
        source = params.get("file")
        if isinstance(source, (str, bytes)) or hasattr(source, "__fspath__"):
            with open(source, "rb") as handle:
                params["file"] = handle
                return self._requester.multipart_post("/files", params)
        return self._requester.multipart_post("/files", params)

    def retrieve(self, file_id: str) -> Any:
        return self._requester.get(f"/files/{file_id}")

    def content(self, file_id: str) -> Any:
        return self._requester.get(f"/files/{file_id}/content")

    def delete(self, file_id: str) -> Any:
        return self._requester.delete(f"/files/{file_id}")


class Images:
    """``/images`` endpoints."""

    def __init__(self, requester: HTTPRequester) -> None:
        self._requester = requester

    def generate(self, parameters: Mapping[str, Any]) -> Any:
        return self._requester.json_post("/images/generations", parameters)

    def edit(self, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        return self._requester.multipart_post("/images/edits", parameters)


__all__ = ["Models", "Files", "Images"]
