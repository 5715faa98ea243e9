"""Shared HTTP session for source and image downloads."""

from __future__ import annotations

import requests

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a singleton :class:`requests.Session`.

    ``requests.Session`` is safe to share between the image worker threads
    for plain GET requests.
    """
    global _session
    if _session is None:
        _session = requests.Session()
    return _session

__all__ = ["get_session"]
