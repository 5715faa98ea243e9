"""Centralised configuration for daily_events.

Environment variables are loaded once and all related constants are
grouped by service for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# ---------------------------------------------------------------------------
# Connection settings (from environment)
# ---------------------------------------------------------------------------
MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "daily_events")
SOURCE_URL: str = os.getenv("SOURCE_URL", "https://example.com/events")

# ---------------------------------------------------------------------------
# Cache settings
# Document size limit: at most CHUNK_SIZE events are stored per document.
# ---------------------------------------------------------------------------
CHUNK_SIZE: int = 5
DELETE_PAGE_SIZE: int = int(os.getenv("DELETE_PAGE_SIZE", "5"))
# Purging stale partitions before writing today's is an operational toggle.
PURGE_BEFORE_WRITE: bool = _env_bool("PURGE_BEFORE_WRITE", False)

# ---------------------------------------------------------------------------
# Image settings
# ---------------------------------------------------------------------------
MAX_IMAGE_SIZE: int = 600
IMAGE_QUALITY: int = 80
IMAGE_MAX_WORKERS: int = int(os.getenv("IMAGE_MAX_WORKERS", "8"))

# ---------------------------------------------------------------------------
# Miscellaneous
# Partition key format, e.g. 19-10-2026
# ---------------------------------------------------------------------------
DATE_FORMAT: str = "%d-%m-%Y"

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # connections
    "MONGODB_URI",
    "MONGODB_DATABASE",
    "SOURCE_URL",
    # cache
    "CHUNK_SIZE",
    "DELETE_PAGE_SIZE",
    "PURGE_BEFORE_WRITE",
    # images
    "MAX_IMAGE_SIZE",
    "IMAGE_QUALITY",
    "IMAGE_MAX_WORKERS",
    # misc
    "DATE_FORMAT",
]
