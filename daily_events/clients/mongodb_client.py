"""MongoDB client lifecycle.

The client is created once at process start and closed at shutdown by
whoever owns the process (the API lifespan or the CLI); it is passed down
explicitly instead of living in a module global.
"""

from __future__ import annotations

import logging
from typing import Optional

from pymongo import MongoClient

from ..config import MONGODB_URI

logger = logging.getLogger(__name__)


def create_mongo_client(uri: Optional[str] = None) -> MongoClient:
    """Return a new :class:`pymongo.MongoClient` for *uri* (defaults to config)."""
    client: MongoClient = MongoClient(uri or MONGODB_URI)
    logger.info("Initialized MongoDB client")
    return client


def close_mongo_client(client: MongoClient) -> None:
    """Close *client* and release its connection pool."""
    client.close()
    logger.info("Closed MongoDB client")

__all__ = ["create_mongo_client", "close_mongo_client"]
