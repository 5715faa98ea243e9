"""Persistence layer: the per-day MongoDB event cache.

Each calendar day is a *partition*: a collection named after the
``dd-mm-yyyy`` date key. A partition holds one document per chunk of
events, ``{"events": [...]}``, so no single document grows past the
store's size limit.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..config import DELETE_PAGE_SIZE
from ..exceptions import CacheReadError, DeleteError
from ..models import Chunk, Event
from ..utils.datetime_utils import is_partition_key

logger = logging.getLogger(__name__)


class CacheStore:
    """Read, write and delete cached event partitions in *database*."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def check_partition(self, date_key: str) -> Optional[List[Event]]:
        """Return every cached event of *date_key*, or ``None`` when it is empty.

        Events come back chunk by chunk; chunk order is whatever the store
        returns. Storage failures raise :class:`CacheReadError`.
        """
        try:
            documents = list(self._db[date_key].find({}, {"_id": 0, "events": 1}))
        except PyMongoError as exc:
            raise CacheReadError(f"Failed to read partition {date_key}: {exc}") from exc

        if not documents:
            logger.info("No cached events for %s", date_key)
            return None

        events: List[Event] = []
        for document in documents:
            events.extend(document.get("events", []))
        logger.info("Found %d cached events in %d chunks for %s", len(events), len(documents), date_key)
        return events

    def persist_chunks(self, date_key: str, chunks: Iterable[Chunk]) -> int:
        """Insert each chunk as its own document under *date_key*.

        Runs after the response has been sent, so failures are logged and
        swallowed. Writes are independent: a failure may leave earlier chunks
        stored. Returns the number of chunks written.
        """
        collection = self._db[date_key]
        written = 0
        try:
            for chunk in chunks:
                collection.insert_one({"events": list(chunk)})
                written += 1
        except PyMongoError as exc:
            logger.error("Failed to save events for %s after %d chunks: %s", date_key, written, exc)
            return written

        logger.info("Saved %d chunks to partition %s", written, date_key)
        return written

    def delete_partition_paged(self, date_key: str, page_size: int = DELETE_PAGE_SIZE) -> int:
        """Delete every document of *date_key*, *page_size* documents at a time.

        Each page is read ordered by ``_id`` and removed with a single
        ``delete_many``; an empty page ends the loop. Works on an empty or
        missing partition. Any storage failure aborts with
        :class:`DeleteError`. Returns the number of deleted documents.
        """
        if page_size < 1:
            raise ValueError(f"page size must be positive, got {page_size}")

        collection = self._db[date_key]
        deleted = 0
        while True:
            try:
                page = list(collection.find({}, {"_id": 1}).sort("_id", ASCENDING).limit(page_size))
                if not page:
                    break
                ids = [document["_id"] for document in page]
                result = collection.delete_many({"_id": {"$in": ids}})
            except PyMongoError as exc:
                raise DeleteError(
                    f"Failed to delete partition {date_key} after {deleted} documents: {exc}"
                ) from exc

            deleted += result.deleted_count
            logger.debug("Deleted page of %d documents from %s", len(ids), date_key)
            # Give other threads a turn between pages.
            time.sleep(0)

        logger.info("Deleted %d documents from partition %s", deleted, date_key)
        return deleted

    def list_partitions(self) -> List[str]:
        """Return the names of all date partitions, sorted."""
        try:
            names = self._db.list_collection_names()
        except PyMongoError as exc:
            raise DeleteError(f"Failed to list partitions: {exc}") from exc
        return sorted(name for name in names if is_partition_key(name))


def purge_stale_partitions(
    store: CacheStore,
    keep: str,
    page_size: int = DELETE_PAGE_SIZE,
) -> Dict[str, int]:
    """Paged-delete every date partition except *keep*.

    Returns ``{date_key: deleted_count}``; raises :class:`DeleteError` on the
    first failing partition.
    """
    stale = [name for name in store.list_partitions() if name != keep]
    logger.info("Purging %d stale partitions (keeping %s)", len(stale), keep)

    deleted: Dict[str, int] = {}
    for date_key in stale:
        deleted[date_key] = store.delete_partition_paged(date_key, page_size)
    return deleted

__all__ = ["CacheStore", "purge_stale_partitions"]
