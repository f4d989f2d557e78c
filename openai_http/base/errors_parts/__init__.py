"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `openai_http.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .client_error import ClientError
from .classification import classify_exception

__all__ = ["ErrorCode", "ClientError", "classify_exception"]
