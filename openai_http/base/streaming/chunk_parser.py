"""Incremental parser for streamed response bodies.

The transport hands over text fragments as they arrive. Fragment boundaries
are arbitrary; the parser looks at each fragment on its own and turns every
recognizable unit into a :class:`StreamEvent`.

Each fragment takes exactly one of three branches:

``LABELED``
    One or more lines of the form ``data: {...}`` or ``error: {...}``
    (label case-insensitive, optional leading whitespace). Every match is
    parsed independently, left to right; a malformed one is dropped without
    affecting its neighbours.
``PREFIXED``
    A line starts with a ``data:``/``error:`` label but carries no complete
    object (``data: [DONE]``, or the first half of an object split across
    fragments). Dropped.
``BARE``
    No label anywhere. The whole fragment is parsed as one JSON object and
    classified ``error`` when it has a truthy ``error`` field, else
    ``unknown``. A whitespace-only fragment is dropped as ``blank``.

Fragments are never buffered: an object split across two fragments is lost.
Callers rely on this drop-on-partial behavior.

Malformed input never raises out of :meth:`StreamChunkParser.feed`; it is
reported to the injected :class:`StreamRecorder`. The default recorder logs
the routine ``[DONE]`` and blank drops at DEBUG and real parse failures at
WARNING. Exceptions raised by the caller's callback do propagate.
"""
from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .recorder import LoggingRecorder, ParseDiagnostic, StreamRecorder
from .stream_event import StreamCallback, StreamEvent, StreamEventType
from .stream_session import StreamSession

_LABELED_LINE = re.compile(r"^\s*(data|error): *(\{.+\})", re.IGNORECASE | re.MULTILINE)
_LABEL_PREFIX = re.compile(r"^\s*(data|error):", re.IGNORECASE | re.MULTILINE)


class FragmentKind(str, Enum):
    """Branch taken for a fragment; see module docstring."""

    LABELED = "labeled"
    PREFIXED = "prefixed"
    BARE = "bare"


def classify_fragment(text: str) -> Tuple[FragmentKind, List["re.Match[str]"]]:
    """Return the branch for ``text`` and, for ``LABELED``, its matches in order."""
    matches = list(_LABELED_LINE.finditer(text))
    if matches:
        return FragmentKind.LABELED, matches
    if _LABEL_PREFIX.search(text):
        return FragmentKind.PREFIXED, []
    return FragmentKind.BARE, []


class StreamChunkParser:
    """Turn streamed fragments into events and hand each payload to ``callback``.

    Parameters:
        callback: invoked with the parsed payload (``result_type`` attached)
            once per recognized unit.
        session: optional per-request counter, incremented per delivered event.
        recorder: sink for dropped-fragment diagnostics; defaults to
            :class:`LoggingRecorder`.
    """

    def __init__(
        self,
        callback: StreamCallback,
        *,
        session: Optional[StreamSession] = None,
        recorder: Optional[StreamRecorder] = None,
    ) -> None:
        self._callback = callback
        self._session = session
        self._recorder = recorder if recorder is not None else LoggingRecorder()

    @property
    def session(self) -> Optional[StreamSession]:
        return self._session

    def feed(self, fragment: Union[str, bytes]) -> Tuple[StreamEvent, ...]:
        """Parse one fragment and return the events delivered to the callback."""
        text = fragment.decode("utf-8", errors="replace") if isinstance(fragment, (bytes, bytearray)) else fragment
        kind, matches = classify_fragment(text)
        if kind is FragmentKind.LABELED:
            return self._feed_labeled(matches)
        if kind is FragmentKind.BARE:
            return self._feed_bare(text)
        self._drop("unterminated_label", text)
        return ()

    __call__ = feed

    def _feed_labeled(self, matches: Sequence["re.Match[str]"]) -> Tuple[StreamEvent, ...]:
        events: List[StreamEvent] = []
        for match in matches:
            label, raw = match.group(1), match.group(2)
            payload = self._parse_object(raw)
            if payload is None:
                continue
            events.append(self._deliver(StreamEventType(label.lower()), payload))
        return tuple(events)

    def _feed_bare(self, text: str) -> Tuple[StreamEvent, ...]:
        if not text.strip():
            self._drop("blank", text)
            return ()
        payload = self._parse_object(text)
        if payload is None:
            return ()
        event_type = StreamEventType.ERROR if payload.get("error") else StreamEventType.UNKNOWN
        return (self._deliver(event_type, payload),)

    def _parse_object(self, text: str) -> Optional[Dict[str, Any]]:
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            self._drop("invalid_json", text, str(exc))
            return None
        if not isinstance(parsed, dict):
            self._drop("not_an_object", text, type(parsed).__name__)
            return None
        return parsed

    def _deliver(self, event_type: StreamEventType, payload: Dict[str, Any]) -> StreamEvent:
        payload["result_type"] = event_type.value
        if self._session is not None:
            self._session.increment()
        self._callback(payload)
        return StreamEvent(type=event_type, payload=payload)

    def _drop(self, reason: str, text: str, detail: Optional[str] = None) -> None:
        self._recorder.record(ParseDiagnostic(reason=reason, fragment=text, detail=detail))


__all__ = ["FragmentKind", "StreamChunkParser", "classify_fragment"]
