"""Cleaning of raw events and removal of events already in the past."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..models import DEFAULT_CATEGORY, DateStamp, Event
from ..utils.text_cleaning import parse_leading_int, strip_control_chars, title_case

logger = logging.getLogger(__name__)


def clean_event(event: Event) -> Event:
    """Return a copy of *event* with cleaned date, category and title."""
    cleaned = dict(event)
    cleaned["date"] = strip_control_chars(event.get("date") or "")
    cleaned["category"] = strip_control_chars(event.get("category") or "")
    if not cleaned["category"]:
        cleaned["category"] = DEFAULT_CATEGORY
    cleaned["title"] = title_case(event.get("title") or "")
    return cleaned


def _gt(a: Optional[int], b: Optional[int]) -> bool:
    return a is not None and b is not None and a > b


def _ge(a: Optional[int], b: Optional[int]) -> bool:
    return a is not None and b is not None and a >= b


def _le(a: Optional[int], b: Optional[int]) -> bool:
    return a is not None and b is not None and a <= b


def is_upcoming(date: str, date_stamp: DateStamp) -> bool:
    """Return ``True`` if the event *date* is not before *date_stamp*.

    Only the last three dash separated fields (year, month, day) are read.
    Missing or non-numeric fields compare false, so such events are dropped.

    The month branch keeps an event whose year is *at most* the fetch year
    when its month is later. That lets e.g. ``2023-07-01`` through on
    2024-06-15. This is the long-standing filter behaviour and is kept as is
    until someone decides otherwise.
    """
    parts = date.split("-")
    if len(parts) < 3:
        return False
    year, month, day = (parse_leading_int(part) for part in parts[-3:])

    # Future year
    if _gt(year, date_stamp.year):
        return True

    # Later month
    if _le(year, date_stamp.year) and _gt(month, date_stamp.month):
        return True

    # Today or later
    return (
        _ge(year, date_stamp.year)
        and _ge(month, date_stamp.month)
        and _ge(day, date_stamp.day)
    )


def normalize_events(events: Iterable[Event], date_stamp: DateStamp) -> List[Event]:
    """Clean every event and keep the ones that are not in the past."""
    cleaned = [clean_event(event) for event in events]
    upcoming = [event for event in cleaned if is_upcoming(event["date"], date_stamp)]
    logger.info("Kept %d of %d events on or after %s", len(upcoming), len(cleaned), date_stamp.formatted)
    return upcoming

__all__ = ["clean_event", "is_upcoming", "normalize_events"]
