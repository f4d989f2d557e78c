"""Multipart parameter shaping.

Every parameter becomes one ``multipart/form-data`` part, so the body stays
multipart even when no file is attached. File-like values (anything with
callable ``read`` and ``close``) become file parts with an empty content-type
hint; the server does not need one. Other values become nameless form parts
``(None, text)``.
"""
from __future__ import annotations

import os
from typing import Any, List, Mapping, Optional, Tuple

FilePart = Tuple[Optional[str], Any, str]
FieldPart = Tuple[None, str]
Part = Tuple[str, Any]


def is_file_like(value: Any) -> bool:
    return callable(getattr(value, "read", None)) and callable(getattr(value, "close", None))


def _part_filename(value: Any, field: str) -> str:
    name = getattr(value, "name", None)
    if isinstance(name, (str, bytes)) and name:
        return os.path.basename(os.fsdecode(name))
    return field


def form_value(value: Any) -> str:
    """Render a form field the way ``httpx`` renders urlencoded values."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def multipart_parameters(parameters: Optional[Mapping[str, Any]]) -> List[Part]:
    """Return ``(field, part)`` pairs for the ``files=`` argument of ``httpx``.

    List and tuple values repeat the field once per item.
    """
    parts: List[Part] = []
    for field, value in (parameters or {}).items():
        if is_file_like(value):
            parts.append((field, (_part_filename(value, field), value, "")))
            continue
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            parts.append((field, (None, form_value(item))))
    return parts


__all__ = ["FieldPart", "FilePart", "Part", "form_value", "is_file_like", "multipart_parameters"]
