"""Response body parsing.

Non-streaming bodies are either a single JSON document or several JSON
objects separated by newlines (JSON Lines, as returned by fine-tune event and
file content endpoints). Bodies that fit neither shape are logged and
reported as ``None``; they never raise.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..logging import get_logger, log_event
from ..streaming import StreamSession

_logger = get_logger("openai_http.http")


def parse_body(text: Optional[str], session: Optional[StreamSession] = None) -> Any:
    """Decode a response body.

    Parameters:
        text: Raw body text; may be empty.
        session: The streaming session of the request, if it streamed.

    Returns:
        ``None`` for a blank body, or the session's usage payload when a
        streaming session was active. Otherwise the decoded JSON value, or a
        list of objects for newline-concatenated JSON.
    """
    if text is None or not text.strip():
        return session.usage() if session is not None else None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    try:
        return json.loads("[" + text.replace("}\n{", "},{") + "]")
    except json.JSONDecodeError as exc:
        log_event(
            _logger,
            "response.unparseable",
            level=logging.WARNING,
            detail=str(exc),
            body_chars=len(text),
        )
        return None


__all__ = ["parse_body"]
