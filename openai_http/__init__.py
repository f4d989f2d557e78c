"""openai_http package

Thin synchronous adapter for OpenAI-style REST endpoints: URI and header
construction, JSON and multipart bodies, response decoding, and a fragment
parser for streamed responses.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`OpenAIClient`, :class:`ClientSettings`, :func:`get_client_config`
    - Requests: :class:`HTTPRequester`
    - Streaming: :class:`StreamChunkParser`, :class:`StreamEvent`,
      :class:`StreamEventType`, :class:`StreamSession`, recorders
    - Exceptions: :class:`ClientError`, :class:`ErrorCode`
"""

from .base.dto import ClientSettings
from .base.errors import ClientError, ErrorCode, classify_exception
from .base.http import HTTPRequester
from .base.logging import configure_logger, get_logger
from .base.streaming import (
    LoggingRecorder,
    MemoryRecorder,
    ParseDiagnostic,
    StreamChunkParser,
    StreamEvent,
    StreamEventType,
    StreamRecorder,
    StreamSession,
)
from .client import OpenAIClient
from .config import get_client_config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "OpenAIClient",
    "ClientSettings",
    "get_client_config",
    "HTTPRequester",
    "StreamChunkParser",
    "StreamEvent",
    "StreamEventType",
    "StreamSession",
    "StreamRecorder",
    "LoggingRecorder",
    "MemoryRecorder",
    "ParseDiagnostic",
    "ClientError",
    "ErrorCode",
    "classify_exception",
    "configure_logger",
    "get_logger",
]
