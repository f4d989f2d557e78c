"""URI and header construction.

OpenAI mode: ``<uri_base>/<api_version>/<path>`` with a bearer token.
Azure mode: ``<uri_base>/<path>?api-version=<api_version>`` with an
``api-key`` header. Caller-supplied ``extra_headers`` are applied last.
"""
from __future__ import annotations

from typing import Optional

import httpx

from ...config.defaults import AZURE_KEY_HEADER, JSON_CONTENT_TYPE, ORGANIZATION_HEADER
from ..dto import ClientSettings


def join_url(*segments: Optional[str]) -> str:
    """Join URL segments with exactly one ``/`` between them.

    Empty segments are skipped. The first segment keeps its leading part
    (scheme and host) and the last keeps any trailing slash.
    """
    cleaned = [str(s) for s in segments if s not in (None, "")]
    if not cleaned:
        return ""
    if len(cleaned) == 1:
        return cleaned[0]
    first, *middle, last = cleaned
    pieces = [first.rstrip("/"), *(m.strip("/") for m in middle), last.lstrip("/")]
    return "/".join(p for p in pieces if p)


def build_uri(settings: ClientSettings, path: str) -> str:
    """Return the absolute request URI for ``path``."""
    if settings.is_azure:
        return f"{join_url(settings.uri_base, path)}?api-version={settings.api_version}"
    return join_url(settings.uri_base, settings.api_version, path)


def build_headers(settings: ClientSettings) -> httpx.Headers:
    """Return request headers for the configured deployment mode.

    Auth headers are omitted when no token is configured. ``extra_headers``
    replace defaults case-insensitively.
    """
    headers = httpx.Headers({"Content-Type": JSON_CONTENT_TYPE})
    token = settings.access_token
    if settings.is_azure:
        if token:
            headers[AZURE_KEY_HEADER] = token
    else:
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if settings.organization_id:
            headers[ORGANIZATION_HEADER] = settings.organization_id
    for name, value in settings.extra_headers.items():
        headers[name] = value
    return headers


__all__ = ["join_url", "build_uri", "build_headers"]
