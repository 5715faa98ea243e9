"""Today's events: cache lookup, scrape-and-enrich on a miss, deferred caching."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, List, Optional

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..config import CHUNK_SIZE, DELETE_PAGE_SIZE, PURGE_BEFORE_WRITE
from ..models import Chunk, Event
from ..services.extraction import extract_events
from ..services.images import enrich_images
from ..services.normalization import normalize_events
from ..services.source import fetch_source_html
from ..services.storage import CacheStore, purge_stale_partitions
from ..utils.chunking import divide
from ..utils.datetime_utils import get_date_stamp

logger = logging.getLogger(__name__)

# Launches a job after the response is sent, e.g. BackgroundTasks.add_task
Scheduler = Callable[..., Any]


def handle_request(
    store: CacheStore,
    schedule: Scheduler,
    now: Optional[datetime] = None,
    purge: bool = PURGE_BEFORE_WRITE,
) -> List[Event]:
    """Return today's events, from the cache when possible.

    On a cache miss the source is scraped, normalized and enriched, and the
    result is handed to *schedule* for persisting once the caller has its
    response. Errors from any step propagate to the caller.
    """
    date_stamp = get_date_stamp(now)

    cached = store.check_partition(date_stamp.formatted)
    if cached is not None:
        logger.info("Serving %d cached events for %s", len(cached), date_stamp.formatted)
        return cached

    logger.info("Cache miss for %s - scraping events", date_stamp.formatted)
    html = fetch_source_html()
    raw_events = extract_events(html, date_stamp)
    events = normalize_events(raw_events, date_stamp)
    events = enrich_images(events)

    # Split events into chunks since the store has a document size limit
    chunks = divide(events, CHUNK_SIZE)
    schedule(persist_events, store, date_stamp.formatted, chunks, purge)

    _log_stats(len(raw_events), len(events), len(chunks))
    return events


def persist_events(
    store: CacheStore,
    date_key: str,
    chunks: List[Chunk],
    purge: bool = False,
    page_size: int = DELETE_PAGE_SIZE,
) -> None:
    """Background job: optionally purge old partitions, then save *chunks*.

    Runs after the response was sent, so nothing is re-raised.
    """
    try:
        if purge:
            purge_stale_partitions(store, keep=date_key, page_size=page_size)
        store.persist_chunks(date_key, chunks)
    except Exception:
        logger.exception("Background persistence for %s failed", date_key)


def _log_stats(scraped: int, kept: int, chunks: int) -> None:
    logger.info("=== Daily Events Statistics ===")
    logger.info("Events scraped: %d", scraped)
    logger.info("Events kept: %d", kept)
    logger.info("Chunks scheduled for caching: %d", chunks)
    logger.info("===============================")

__all__ = ["handle_request", "persist_events"]
