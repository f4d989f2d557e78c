"""HTTP utilities package for the client.

Exposes the request helpers and the pieces they are built from.
"""

from .body import parse_body
from .client import build_httpx_client
from .multipart import form_value, is_file_like, multipart_parameters
from .requester import HTTPRequester
from .urls import build_headers, build_uri, join_url

__all__ = [
    "HTTPRequester",
    "build_httpx_client",
    "build_headers",
    "build_uri",
    "join_url",
    "form_value",
    "is_file_like",
    "multipart_parameters",
    "parse_body",
]
