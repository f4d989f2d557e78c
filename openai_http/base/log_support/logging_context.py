"""Per-request fields shared by the ``http.*`` and ``stream.*`` log events."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Method, path and target of one request.

    ``endpoint`` is the API path as the caller passed it (``/chat/completions``);
    ``url`` is the resolved URI, which differs between OpenAI and Azure mode.
    """

    method: Optional[str] = None
    endpoint: Optional[str] = None
    url: Optional[str] = None
    api_type: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
