"""Request helpers: GET, JSON POST (optionally streamed), multipart POST, DELETE.

Every call builds the URI and headers from :class:`ClientSettings`, sends the
request through a short-lived ``httpx.Client`` and decodes the body with
:func:`parse_body`. HTTP error statuses are not raised; their JSON bodies
are returned like any other response.

Streaming
---------
When ``parameters["stream"]`` is callable, the request is sent with
``"stream": true`` and each decoded text fragment of the response is fed to
a :class:`StreamChunkParser` bound to that callable and to a fresh
:class:`StreamSession`. The return value is then the session's usage
payload. A truthy, non-callable ``stream`` is a usage error raised before
anything is sent.

Failure modes
-------------
- ``ClientError(VALIDATION)`` for a non-callable stream handler.
- ``httpx.HTTPError`` subclasses for transport failures, logged with a
  classified ``error_code`` and re-raised unchanged.
"""
from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional

import httpx

from ...config.defaults import JSON_CONTENT_TYPE
from ..dto import ClientSettings
from ..errors import ClientError, ErrorCode, classify_exception
from ..logging import LogContext, get_logger, log_event
from ..streaming import StreamChunkParser, StreamRecorder, StreamSession
from .body import parse_body
from .client import build_httpx_client
from .multipart import multipart_parameters
from .urls import build_headers, build_uri


class HTTPRequester:
    """Send requests for one :class:`ClientSettings` instance.

    Parameters:
        settings: connection settings.
        transport: optional ``httpx`` transport shared by every request.
        recorder: diagnostic sink handed to each stream parser; ``None``
            selects the parser's logging default.
    """

    def __init__(
        self,
        settings: ClientSettings,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        recorder: Optional[StreamRecorder] = None,
    ) -> None:
        self.settings = settings
        self._transport = transport
        self._recorder = recorder
        self._logger = get_logger("openai_http.http")

    def uri(self, path: str) -> str:
        return build_uri(self.settings, path)

    def headers(self) -> httpx.Headers:
        return build_headers(self.settings)

    def get(self, path: str) -> Any:
        response = self._send("GET", path)
        return parse_body(response.text)

    def delete(self, path: str) -> Any:
        response = self._send("DELETE", path)
        return parse_body(response.text)

    def json_post(self, path: str, parameters: Mapping[str, Any]) -> Any:
        """POST ``parameters`` as JSON; stream when ``parameters["stream"]`` is callable."""
        body = dict(parameters)
        handler = body.get("stream")
        if callable(handler):
            session = StreamSession()
            parser = StreamChunkParser(handler, session=session, recorder=self._recorder)
            body["stream"] = True
            return self._stream_post(path, body, parser)
        if handler:
            raise ClientError(
                code=ErrorCode.VALIDATION,
                message="The stream parameter must be callable",
                endpoint=path,
            )
        response = self._send("POST", path, content=json.dumps(body).encode("utf-8"))
        return parse_body(response.text)

    def multipart_post(self, path: str, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        """POST ``parameters`` as ``multipart/form-data``; file-like values become file parts."""
        parts = multipart_parameters(parameters)
        headers = self.headers()
        # httpx supplies multipart/form-data with its boundary
        if headers.get("Content-Type") == JSON_CONTENT_TYPE:
            del headers["Content-Type"]
        response = self._send("POST", path, headers=headers, files=parts)
        return parse_body(response.text)

    def _context(self, method: str, path: str) -> LogContext:
        return LogContext(method=method, endpoint=path, url=self.uri(path), api_type=self.settings.api_type)

    @contextmanager
    def _logged_transport(self, method: str, path: str) -> Iterator[None]:
        try:
            yield
        except httpx.HTTPError as exc:
            code = classify_exception(exc)
            log_event(
                self._logger,
                "http.transport_error",
                self._context(method, path),
                level=logging.ERROR,
                error_code=code.value,
                retryable=code.retryable,
                error=str(exc) or type(exc).__name__,
            )
            raise

    def _send(
        self,
        method: str,
        path: str,
        *,
        headers: Optional[httpx.Headers] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        with self._logged_transport(method, path):
            with build_httpx_client(self.settings, transport=self._transport) as client:
                response = client.request(
                    method,
                    self.uri(path),
                    headers=headers if headers is not None else self.headers(),
                    **kwargs,
                )
        log_event(
            self._logger,
            "http.request",
            self._context(method, path),
            level=logging.DEBUG,
            status_code=response.status_code,
        )
        return response

    def _stream_post(self, path: str, body: Mapping[str, Any], parser: StreamChunkParser) -> Any:
        ctx = self._context("POST", path)
        with self._logged_transport("POST", path):
            with build_httpx_client(self.settings, transport=self._transport) as client:
                with client.stream(
                    "POST",
                    self.uri(path),
                    headers=self.headers(),
                    content=json.dumps(body).encode("utf-8"),
                ) as response:
                    log_event(self._logger, "stream.start", ctx, level=logging.DEBUG, status_code=response.status_code)
                    for fragment in response.iter_text():
                        parser.feed(fragment)
        session = parser.session
        log_event(
            self._logger,
            "stream.finish",
            ctx,
            level=logging.DEBUG,
            received=session.received if session is not None else None,
        )
        return parse_body("", session)


__all__ = ["HTTPRequester"]
