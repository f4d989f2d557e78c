"""Data transfer objects for the client layer."""

from .client_settings import ClientSettings

__all__ = ["ClientSettings"]
