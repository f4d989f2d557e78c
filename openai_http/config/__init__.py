"""Unified configuration layer for the client.

Settings are merged in a predictable order:
    1. Built-in defaults (``config.defaults``)
    2. Environment variables (``OPENAI_ACCESS_TOKEN``, ``OPENAI_URI_BASE``, ...)
    3. In-code overrides passed to :func:`get_client_config`

Public API
----------
* get_client_config(overrides: dict | None = None, **kwargs) -> ClientSettings
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from .env import env_overrides, is_placeholder

if TYPE_CHECKING:
    from ..base.dto import ClientSettings


def get_client_config(overrides: Optional[Dict[str, Any]] = None, **kwargs: Any) -> "ClientSettings":
    """Build :class:`ClientSettings` from defaults, environment and overrides.

    ``None`` override values are ignored so callers can forward optional
    arguments without clobbering environment values. A token that looks like
    a placeholder is logged as a warning but still used.
    """
    # Lazy imports: base.dto pulls in config.defaults through base.timeouts.
    from ..base.dto import ClientSettings
    from ..base.logging import get_logger, log_event

    merged: Dict[str, Any] = dict(env_overrides())
    for source in (overrides or {}, kwargs):
        merged.update({k: v for k, v in source.items() if v is not None})

    settings = ClientSettings(**merged)
    if is_placeholder(settings.access_token):
        log_event(
            get_logger("openai_http.config"),
            "config.placeholder_token",
            level=logging.WARNING,
            api_type=settings.api_type,
        )
    return settings


__all__ = ["get_client_config", "is_placeholder"]
