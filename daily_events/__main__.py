"""Command line entry point: serve the API or purge cache partitions."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .clients.mongodb_client import close_mongo_client, create_mongo_client
from .config import DELETE_PAGE_SIZE, MONGODB_DATABASE
from .exceptions import DeleteError
from .services.storage import CacheStore, purge_stale_partitions
from .utils.datetime_utils import get_date_stamp, is_partition_key

logger = logging.getLogger("daily_events")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daily_events",
        description="Today's events, scraped once per day and cached",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Start the HTTP server")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000, help="Server port (default: 8000)")

    purge = sub.add_parser("purge", help="Delete one cached day (dd-mm-yyyy)")
    purge.add_argument("date")
    purge.add_argument("--page-size", type=int, default=DELETE_PAGE_SIZE)

    stale = sub.add_parser("purge-stale", help="Delete every cached day except today")
    stale.add_argument("--page-size", type=int, default=DELETE_PAGE_SIZE)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.command == "serve":
        import uvicorn

        logger.info("Starting server on port %d...", args.port)
        uvicorn.run("daily_events.api:app", host=args.host, port=args.port)
        return 0

    if args.command == "purge" and not is_partition_key(args.date):
        logger.error("Not a dd-mm-yyyy date: %s", args.date)
        return 2

    client = create_mongo_client()
    try:
        store = CacheStore(client[MONGODB_DATABASE])
        if args.command == "purge":
            deleted = store.delete_partition_paged(args.date, args.page_size)
            logger.info("Removed %d documents from %s", deleted, args.date)
        else:
            today = get_date_stamp().formatted
            deleted_by_day = purge_stale_partitions(store, keep=today, page_size=args.page_size)
            logger.info("Removed %d stale partitions", len(deleted_by_day))
    except DeleteError as exc:
        logger.error("%s", exc)
        return 1
    finally:
        close_mongo_client(client)
    return 0


if __name__ == "__main__":
    sys.exit(main())
