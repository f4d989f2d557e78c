"""Streaming package for the client layer.

Exposes the chunk parser, its event and session types, and diagnostic
recorders under a single namespace.
"""

from .stream_event import StreamCallback, StreamEvent, StreamEventType
from .stream_session import StreamSession
from .recorder import ROUTINE_REASONS, LoggingRecorder, MemoryRecorder, ParseDiagnostic, StreamRecorder
from .chunk_parser import FragmentKind, StreamChunkParser, classify_fragment

__all__ = [
    "StreamCallback",
    "StreamEvent",
    "StreamEventType",
    "StreamSession",
    "ROUTINE_REASONS",
    "LoggingRecorder",
    "MemoryRecorder",
    "ParseDiagnostic",
    "StreamRecorder",
    "FragmentKind",
    "StreamChunkParser",
    "classify_fragment",
]
