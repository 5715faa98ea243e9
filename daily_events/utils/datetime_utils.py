"""Utility functions for working with dates and times."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..config import DATE_FORMAT
from ..models import DateStamp

__all__ = [
    "get_date_stamp",
    "is_partition_key",
]


def get_date_stamp(now: Optional[datetime] = None) -> DateStamp:
    """Return the :class:`DateStamp` for *now* (wall-clock time by default)."""
    if now is None:
        now = datetime.now()
    return DateStamp(
        formatted=now.strftime(DATE_FORMAT),
        day=now.day,
        month=now.month,
        year=now.year,
    )


def is_partition_key(name: str) -> bool:
    """Return ``True`` if *name* is a dd-mm-yyyy partition key."""
    try:
        datetime.strptime(name, DATE_FORMAT)
    except ValueError:
        return False
    # strptime accepts unpadded values ("1-6-2024"); keys are always padded
    return len(name) == 10
