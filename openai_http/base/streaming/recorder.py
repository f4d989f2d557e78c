"""Diagnostic recorders for dropped stream fragments.

The chunk parser never raises on malformed input; instead it hands a
:class:`ParseDiagnostic` to an injected :class:`StreamRecorder`. The default
recorder writes a structured log event, while :class:`MemoryRecorder` keeps
diagnostics in memory for inspection.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, runtime_checkable

from ..logging import get_logger, log_event

# Fragment text included in log events is truncated to this many characters.
FRAGMENT_PREVIEW_CHARS = 200

# Drops seen on healthy streams, such as the `data: [DONE]` terminator.
ROUTINE_REASONS = frozenset({"unterminated_label", "blank"})


@dataclass(frozen=True)
class ParseDiagnostic:
    """Why a fragment, or one labeled line inside it, was dropped.

    Attributes:
        reason: short machine-readable tag (``invalid_json``,
            ``not_an_object``, ``unterminated_label``, ``blank``).
        fragment: the text that failed to parse.
        detail: parser error message, if any.
    """

    reason: str
    fragment: str
    detail: Optional[str] = None


@runtime_checkable
class StreamRecorder(Protocol):
    """Sink for parser diagnostics."""

    def record(self, diagnostic: ParseDiagnostic) -> None:  # pragma: no cover - interface
        ...


class LoggingRecorder:
    """Emit each diagnostic as a ``stream.fragment_dropped`` log event.

    Reasons in :data:`ROUTINE_REASONS` are logged at ``routine_level``
    (DEBUG by default); real parse failures at ``level`` (WARNING).
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.WARNING,
        routine_level: int = logging.DEBUG,
    ) -> None:
        self._logger = logger or get_logger("openai_http.streaming")
        self._level = level
        self._routine_level = routine_level

    def level_for(self, diagnostic: ParseDiagnostic) -> int:
        return self._routine_level if diagnostic.reason in ROUTINE_REASONS else self._level

    def record(self, diagnostic: ParseDiagnostic) -> None:
        log_event(
            self._logger,
            "stream.fragment_dropped",
            level=self.level_for(diagnostic),
            reason=diagnostic.reason,
            detail=diagnostic.detail,
            fragment=diagnostic.fragment[:FRAGMENT_PREVIEW_CHARS],
            fragment_chars=len(diagnostic.fragment),
        )


class MemoryRecorder:
    """Collect diagnostics in a list."""

    def __init__(self) -> None:
        self.diagnostics: List[ParseDiagnostic] = []

    def record(self, diagnostic: ParseDiagnostic) -> None:
        self.diagnostics.append(diagnostic)

    @property
    def reasons(self) -> List[str]:
        return [d.reason for d in self.diagnostics]


__all__ = [
    "ROUTINE_REASONS",
    "ParseDiagnostic",
    "StreamRecorder",
    "LoggingRecorder",
    "MemoryRecorder",
]
