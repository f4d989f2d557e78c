"""openai_http.config.env
======================

Environment variable mapping and helpers for client settings.

Purpose
-------
- Provide a single source of truth for the environment variables that feed
  :class:`~openai_http.base.dto.ClientSettings`.
- Offer small lookup utilities that never raise on unset variables; callers
  decide how to proceed.

Design Notes
------------
- ``ENV_MAP`` maps each settings field to an ordered tuple of variable names;
  the first one that is set wins.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

# Settings field -> ordered tuple of acceptable env var names (canonical first)
ENV_MAP: Dict[str, Tuple[str, ...]] = {
    "access_token": ("OPENAI_ACCESS_TOKEN", "OPENAI_API_KEY"),
    "organization_id": ("OPENAI_ORGANIZATION_ID",),
    "uri_base": ("OPENAI_URI_BASE",),
    "api_type": ("OPENAI_API_TYPE",),
    "api_version": ("OPENAI_API_VERSION",),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def resolve_env(field: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve a settings field from the environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)``; ``(None, None)`` when the field is unknown
        or no candidate variable holds a non-blank value.
    """
    for name in ENV_MAP.get(field, ()):
        val = os.getenv(name)
        if val is not None and val.strip():
            return val.strip(), name
    return None, None


def env_overrides() -> Dict[str, str]:
    """Return every settings field currently supplied by the environment."""
    found: Dict[str, str] = {}
    for field in ENV_MAP:
        val, _ = resolve_env(field)
        if val is not None:
            found[field] = val
    return found


__all__ = ["ENV_MAP", "is_placeholder", "resolve_env", "env_overrides"]
