"""
Decoding utilities for image search responses.

This module turns the JSON payload returned by a Pixabay-compatible search
endpoint into ImageResult records. It performs no I/O.
"""

import logging
from typing import Any, List, Mapping, Optional

from pixsearch.core.exceptions import DecodeError
from pixsearch.core.models import ImageResult

logger = logging.getLogger(__name__)

HITS_KEY = "hits"
STRING_FIELDS = ("webformatURL", "largeImageURL", "tags", "user")
COUNT_FIELDS = ("comments", "likes", "downloads")


def format_attribution(user: str) -> str:
    return f"Uploaded by: @{user}"


def format_stats(comments: int, likes: int, downloads: int) -> str:
    return f"{comments} Comments, {likes} Likes, {downloads} Downloads"


def _is_count(value: Any) -> bool:
    # bool is an int subclass; a JSON true/false is not a count
    return isinstance(value, int) and not isinstance(value, bool)


def decode_hit(hit: Any) -> Optional[ImageResult]:
    """
    Decode one hit object into an ImageResult.

    Args:
        hit: A single element of the response's hit list

    Returns:
        ImageResult, or None if any required field is missing or mistyped
    """
    if not isinstance(hit, Mapping):
        return None

    for key in STRING_FIELDS:
        value = hit.get(key)
        if not isinstance(value, str) or not value:
            return None
    for key in COUNT_FIELDS:
        if not _is_count(hit.get(key)):
            return None

    return ImageResult(
        preview_url=hit["webformatURL"],
        full_url=hit["largeImageURL"],
        tags=hit["tags"],
        attribution=format_attribution(hit["user"]),
        stats=format_stats(hit["comments"], hit["likes"], hit["downloads"]),
    )


def extract_hits(payload: Any) -> List[Any]:
    """Return the raw hit list, raising DecodeError if the top level is wrong."""
    if not isinstance(payload, Mapping):
        raise DecodeError(
            f"Expected a JSON object at top level, got {type(payload).__name__}"
        )
    hits = payload.get(HITS_KEY)
    if not isinstance(hits, list):
        raise DecodeError(f"Response is missing the '{HITS_KEY}' list")
    return hits


def decode_hits(payload: Any) -> List[ImageResult]:
    """
    Decode a whole search response, preserving server order.

    Malformed hits are skipped; they never abort the batch.

    Raises:
        DecodeError: if the payload is not an object with a hit list
    """
    hits = extract_hits(payload)
    results: List[ImageResult] = []
    for hit in hits:
        image = decode_hit(hit)
        if image is not None:
            results.append(image)

    dropped = len(hits) - len(results)
    if dropped:
        logger.debug("Dropped %d of %d malformed hits", dropped, len(hits))
    return results
