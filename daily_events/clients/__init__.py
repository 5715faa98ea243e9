"""Convenience re-exports for SDK client accessors."""

from .http_client import get_session  # noqa: F401
from .mongodb_client import create_mongo_client, close_mongo_client  # noqa: F401

__all__ = [
    "get_session",
    "create_mongo_client",
    "close_mongo_client",
]
