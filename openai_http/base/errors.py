"""Error taxonomy: ``ErrorCode``, ``ClientError`` and ``classify_exception``."""

from .errors_parts.error_code import ErrorCode
from .errors_parts.client_error import ClientError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "ClientError", "classify_exception"]
