"""Per-request streaming counter.

A :class:`StreamSession` lives for exactly one streamed request. It counts
the events delivered to the caller so a usage figure can be reported when
the server omits one from the final (empty) body.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class StreamSession:
    """Running tally of delivered events for one streamed request.

    Not thread-safe; each concurrent stream owns its own session.
    """

    received: int = 0

    def increment(self) -> int:
        self.received += 1
        return self.received

    def usage(self) -> Dict[str, Any]:
        """Return the usage payload substituted for an empty streaming body."""
        return {"usage": {"completion_token": self.received}}


__all__ = ["StreamSession"]
