"""httpx client construction for request helpers.

Each request opens a short-lived ``httpx.Client`` from
:func:`build_httpx_client` and closes it when the response has been consumed.
Timeouts derive from :func:`get_timeout_config` and the settings'
``request_timeout``; no numeric literals live here.

A ``transport`` may be injected (for example ``httpx.MockTransport`` in
tests); it is shared by every client built with it.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..dto import ClientSettings
from ..timeouts import get_timeout_config


def build_httpx_client(settings: ClientSettings, *, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """Return a new ``httpx.Client`` configured from ``settings``.

    Callers own the client and should use it as a context manager.
    """
    timeout = get_timeout_config().to_httpx(settings.request_timeout)
    if transport is not None:
        return httpx.Client(timeout=timeout, transport=transport)
    return httpx.Client(timeout=timeout)


__all__ = ["build_httpx_client"]
