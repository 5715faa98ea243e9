"""Top-level package for the daily-events project.

Today's events are served from a per-day MongoDB cache, scraped from the
source site on the first request of the day. Run the API with
`python -m daily_events serve`, or embed the workflow with
`from daily_events import handle_request`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("daily-events")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .workflows.daily_pipeline import handle_request  # convenience re-export

__all__ = ["handle_request", "__version__"]
