"""HTTP entry point: a single method-agnostic endpoint returning today's events."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.responses import JSONResponse

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .clients.mongodb_client import close_mongo_client, create_mongo_client
from .config import MONGODB_DATABASE
from .services.storage import CacheStore
from .workflows.daily_pipeline import handle_request

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the MongoDB client on startup and close it on shutdown."""
    client = create_mongo_client()
    app.state.store = CacheStore(client[MONGODB_DATABASE])
    try:
        yield
    finally:
        close_mongo_client(client)


app = FastAPI(
    title="Daily Events",
    description="Today's events, scraped once per day and cached",
    version="1.0.0",
    lifespan=lifespan,
)


@app.api_route("/", methods=ALL_METHODS)
def check_events(request: Request, background_tasks: BackgroundTasks) -> JSONResponse:
    """Return ``{"events": [...]}`` or ``{"error": ...}`` with status 500."""
    try:
        events = handle_request(request.app.state.store, background_tasks.add_task)
    except Exception as err:
        logger.exception("Request failed")
        return JSONResponse(status_code=500, content={"error": f"Server error: {err}"})
    return JSONResponse(status_code=200, content={"events": events})

__all__ = ["app", "lifespan"]
