"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from daily_events.services import extract_events` without having to
know which underlying module provides the symbol.
"""

from .source import fetch_source_html  # noqa: F401
from .extraction import extract_events  # noqa: F401
from .normalization import normalize_events  # noqa: F401
from .images import enrich_images  # noqa: F401
from .storage import CacheStore, purge_stale_partitions  # noqa: F401

__all__ = [
    "fetch_source_html",
    "extract_events",
    "normalize_events",
    "enrich_images",
    "CacheStore",
    "purge_stale_partitions",
]
