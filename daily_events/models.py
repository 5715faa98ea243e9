"""Domain models used across the project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

# Events travel through the pipeline (and into MongoDB / JSON) as plain dicts.
# Keys: link, imageLink | image, date, title, category, fetch_date
Event = Dict[str, Any]
Chunk = List[Event]

DEFAULT_CATEGORY: str = "Other"


@dataclass(frozen=True, slots=True)
class DateStamp:
    """The day a request is served for.

    ``formatted`` (dd-mm-yyyy) doubles as the cache partition key, the
    integer parts are used to filter out past events.
    """

    formatted: str
    day: int
    month: int
    year: int

__all__ = ["DateStamp", "Event", "Chunk", "DEFAULT_CATEGORY"]
