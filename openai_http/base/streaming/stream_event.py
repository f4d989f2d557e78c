"""Stream event primitives.

Keeps the structured output of the chunk parser separate from the parsing
logic so callers can type against it without importing the parser.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict


class StreamEventType(str, Enum):
    """Classification attached to every parsed unit as ``result_type``."""

    DATA = "data"
    ERROR = "error"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StreamEvent:
    """One recognized unit of a streamed response.

    Fields:
      type: classification of the unit
      payload: parsed JSON object, with ``result_type`` set to ``type.value``
    """

    type: StreamEventType
    payload: Dict[str, Any]

    def is_error(self) -> bool:
        return self.type is StreamEventType.ERROR


# Caller-supplied handler invoked once per parsed payload.
StreamCallback = Callable[[Dict[str, Any]], None]


__all__ = ["StreamEventType", "StreamEvent", "StreamCallback"]
