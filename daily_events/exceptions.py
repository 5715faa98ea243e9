"""Error taxonomy for the ingestion-and-cache pipeline."""


class DailyEventsError(Exception):
    """Base class for every error raised by daily_events."""


class FetchError(DailyEventsError):
    """Raised when the event source cannot be downloaded."""


class ParseError(DailyEventsError):
    """Raised when source markup cannot be turned into event records."""


class EnrichmentError(DailyEventsError):
    """Raised when an event image cannot be downloaded or processed."""


class CacheReadError(DailyEventsError):
    """Raised when a cache partition cannot be read (distinct from an empty one)."""


class CachePersistError(DailyEventsError):
    """Raised when a chunk cannot be written to a cache partition."""


class DeleteError(DailyEventsError):
    """Raised when a paged partition delete fails part way."""


__all__ = [
    "DailyEventsError",
    "FetchError",
    "ParseError",
    "EnrichmentError",
    "CacheReadError",
    "CachePersistError",
    "DeleteError",
]
