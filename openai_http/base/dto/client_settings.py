"""Typed settings object for the HTTP client.

Purpose
-------
Capture everything the request helpers need to build URIs and headers:
credentials, endpoint, deployment mode, timeout and caller-supplied headers.
A single validated object replaces long constructor argument lists.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_copy()``.

Failure modes
-------------
- Pydantic raises ``ValidationError`` for values of the wrong type or an
  unsupported ``api_type``.
"""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...config.defaults import (
    AZURE_API_TYPE,
    DEFAULT_API_TYPE,
    DEFAULT_API_VERSION,
    DEFAULT_URI_BASE,
    SUPPORTED_API_TYPES,
)
from ..timeouts import get_timeout_config


def _default_request_timeout() -> float:
    return get_timeout_config().request_timeout_seconds


class ClientSettings(BaseModel):
    """Connection settings shared by every request.

    Attributes
    ----------
    access_token:
        Bearer token (OpenAI mode) or API key (Azure mode). Attached verbatim
        to each request; no refresh lifecycle.
    organization_id:
        Optional organization sent as ``OpenAI-Organization`` in OpenAI mode.
    uri_base:
        Base URL. For Azure this is the deployment URL.
    api_type:
        ``"openai"`` or ``"azure"``; selects URI shape and auth header.
    api_version:
        Path segment in OpenAI mode, ``api-version`` query value in Azure mode.
    request_timeout:
        Per-request timeout in seconds.
    extra_headers:
        Headers merged last into every request; they win over defaults.
    """

    model_config = ConfigDict(frozen=True)

    access_token: Optional[str] = None
    organization_id: Optional[str] = None
    uri_base: str = DEFAULT_URI_BASE
    api_type: str = DEFAULT_API_TYPE
    api_version: str = DEFAULT_API_VERSION
    request_timeout: float = Field(default_factory=_default_request_timeout, gt=0)
    extra_headers: Dict[str, str] = Field(default_factory=dict)

    @field_validator("api_type")
    @classmethod
    def _normalize_api_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in SUPPORTED_API_TYPES:
            raise ValueError(f"api_type must be one of {SUPPORTED_API_TYPES}, got {value!r}")
        return normalized

    @property
    def is_azure(self) -> bool:
        """Return True when requests target an Azure OpenAI deployment."""
        return self.api_type == AZURE_API_TYPE


__all__ = ["ClientSettings"]
