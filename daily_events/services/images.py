"""Image enrichment: download, shrink, compress and embed event images."""

from __future__ import annotations

import base64
import concurrent.futures as _fut
import logging
from io import BytesIO
from typing import List, Sequence

import requests
from PIL import Image, UnidentifiedImageError

from ..clients.http_client import get_session
from ..config import IMAGE_MAX_WORKERS, IMAGE_QUALITY, MAX_IMAGE_SIZE
from ..exceptions import EnrichmentError
from ..models import Event

logger = logging.getLogger(__name__)


def download_image(url: str) -> bytes:
    """Return the raw bytes behind *url*."""
    response = get_session().get(url)
    response.raise_for_status()
    return response.content


def compress_image(data: bytes, max_size: int = MAX_IMAGE_SIZE, quality: int = IMAGE_QUALITY) -> bytes:
    """Fit *data* into ``max_size`` x ``max_size`` and re-encode it as JPEG.

    Images already within bounds keep their dimensions; larger ones are
    scaled down preserving the aspect ratio.
    """
    with Image.open(BytesIO(data)) as image:
        image.load()
        if image.width > max_size or image.height > max_size:
            image.thumbnail((max_size, max_size))
        if image.mode != "RGB":
            image = image.convert("RGB")
        buffer = BytesIO()
        image.save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


def encode_image(url: str) -> str:
    """Download the image at *url* and return it as a base64 JPEG string."""
    try:
        data = download_image(url)
        jpeg = compress_image(data)
    except (requests.RequestException, UnidentifiedImageError, OSError) as exc:
        raise EnrichmentError(f"Failed to process image {url}: {exc}") from exc
    return base64.b64encode(jpeg).decode("ascii")


def _enrich_one(event: Event) -> Event:
    url = event.get("imageLink")
    if not url:
        raise EnrichmentError(f"Event '{event.get('title')}' has no image link")
    enriched = {key: value for key, value in event.items() if key != "imageLink"}
    enriched["image"] = encode_image(url)
    return enriched


def enrich_images(events: Sequence[Event], max_workers: int = IMAGE_MAX_WORKERS) -> List[Event]:
    """Replace every event's ``imageLink`` with an embedded ``image``.

    Images are processed concurrently; the call returns once all of them are
    done. The first failure fails the whole batch with
    :class:`EnrichmentError`. Output order matches *events*.
    """
    if not events:
        return []

    logger.info("Downloading %d event images", len(events))
    max_workers = max(1, int(max_workers or 1))
    with _fut.ThreadPoolExecutor(max_workers=max_workers) as ex:
        futures = [ex.submit(_enrich_one, event) for event in events]
        try:
            enriched = [fu.result() for fu in futures]
        except EnrichmentError:
            for fu in futures:
                fu.cancel()
            raise

    logger.info("Embedded %d images", len(enriched))
    return enriched

__all__ = ["download_image", "compress_image", "encode_image", "enrich_images"]
