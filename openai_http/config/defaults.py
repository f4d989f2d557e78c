"""openai_http.config.defaults
===========================

Central place for small, stable default values used across the package.
These defaults can be overridden via environment variables or in-code
settings, but provide sensible fallbacks for local development and tests.

This module intentionally imports nothing from the rest of the package to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Endpoint ----
DEFAULT_URI_BASE = "https://api.openai.com/"
DEFAULT_API_VERSION = "v1"
DEFAULT_API_TYPE = "openai"
AZURE_API_TYPE = "azure"
SUPPORTED_API_TYPES = (DEFAULT_API_TYPE, AZURE_API_TYPE)

# ---- Timeouts (seconds) ----
DEFAULT_REQUEST_TIMEOUT_SECONDS = 120.0
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0

# ---- Headers ----
JSON_CONTENT_TYPE = "application/json"
ORGANIZATION_HEADER = "OpenAI-Organization"
AZURE_KEY_HEADER = "api-key"

__all__ = [
    "DEFAULT_URI_BASE",
    "DEFAULT_API_VERSION",
    "DEFAULT_API_TYPE",
    "AZURE_API_TYPE",
    "SUPPORTED_API_TYPES",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
    "JSON_CONTENT_TYPE",
    "ORGANIZATION_HEADER",
    "AZURE_KEY_HEADER",
]
