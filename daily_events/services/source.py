"""Download of the event source page."""

from __future__ import annotations

import logging

import requests

from ..clients.http_client import get_session
from ..config import SOURCE_URL
from ..exceptions import FetchError

# ---------------------------------------------------------------------------
# Local request settings (only used by this service)
# ---------------------------------------------------------------------------
HTML_ACCEPT: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

logger = logging.getLogger(__name__)


def fetch_source_html(url: str = SOURCE_URL) -> str:
    """GET *url* asking for HTML and return the body text.

    Network errors and non-2xx responses raise :class:`FetchError`.
    """
    logger.info("Downloading events page from %s", url)
    try:
        response = get_session().get(url, headers={"Accept": HTML_ACCEPT})
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Failed to download %s: %s", url, exc)
        raise FetchError(f"Failed to download {url}: {exc}") from exc

    logger.debug("Downloaded %d characters", len(response.text))
    return response.text

__all__ = ["fetch_source_html", "HTML_ACCEPT"]
