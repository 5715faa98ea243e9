"""Parsing of the source page into raw event records."""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..exceptions import ParseError
from ..models import DEFAULT_CATEGORY, DateStamp, Event

# ---------------------------------------------------------------------------
# Selectors of the source page layout
# ---------------------------------------------------------------------------
EVENT_SELECTOR: str = ".box"
LINK_SELECTOR: str = ".image"
IMAGE_SELECTOR: str = "img"
DATE_SELECTOR: str = ".date"
TITLE_SELECTOR: str = ".title a"
CATEGORY_SELECTOR: str = ".category"

logger = logging.getLogger(__name__)


def _text(node: Tag, selector: str) -> str:
    # All matches concatenated, whitespace untouched (cleaned later).
    return "".join(match.get_text() for match in node.select(selector))


def _attr(node: Optional[Tag], attr: str) -> Optional[str]:
    if node is None:
        return None
    value = node.get(attr)
    return str(value) if value is not None else None


def _extract_one(box: Tag, fetch_date: str) -> Event:
    link = box.select_one(LINK_SELECTOR)
    image = link.select_one(IMAGE_SELECTOR) if link is not None else None
    return {
        "link": _attr(link, "href"),
        "imageLink": _attr(image, "src"),
        "date": _text(box, DATE_SELECTOR),
        "title": _text(box, TITLE_SELECTOR),
        "category": _text(box, CATEGORY_SELECTOR) or DEFAULT_CATEGORY,
        "fetch_date": fetch_date,
    }


def extract_events(html: str, date_stamp: DateStamp) -> List[Event]:
    """Return one raw event per event block of *html*, in document order."""
    try:
        soup = BeautifulSoup(html or "", "html.parser")
        events = [_extract_one(box, date_stamp.formatted) for box in soup.select(EVENT_SELECTOR)]
    except Exception as exc:
        raise ParseError(f"Failed to parse events page: {exc}") from exc

    logger.info("Extracted %d raw events", len(events))
    return events

__all__ = ["extract_events"]
