"""HTTP helpers shared by the server."""

from .clients import DEFAULT_HEADERS, create_async_client

__all__ = ["DEFAULT_HEADERS", "create_async_client"]
