"""
Image search records shared by the client, use cases and API
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List

DEFAULT_PAGE_SIZE = 36


@dataclass(frozen=True, slots=True)
class ImageResult:
    """One search hit.

    - preview_url: reduced-resolution rendition (grid thumbnail)
    - full_url: full-resolution rendition (viewer)
    - tags: comma-separated tags as served
    - attribution: uploader credit, "Uploaded by: @<user>"
    - stats: engagement summary, "<c> Comments, <l> Likes, <d> Downloads"
    """

    preview_url: str
    full_url: str
    tags: str
    attribution: str
    stats: str

    def __post_init__(self) -> None:
        for name in ("preview_url", "full_url", "tags", "attribution", "stats"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"ImageResult.{name} must be a non-empty string")

    @property
    def tag_list(self) -> List[str]:
        return [t.strip() for t in self.tags.split(",") if t.strip()]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """A single page request; built per call, never stored."""

    query: str
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

    def to_params(self, api_key: str, image_type: str = "photo") -> Dict[str, Any]:
        return {
            "key": api_key,
            "q": self.query,
            "image_type": image_type,
            "per_page": self.page_size,
            "page": self.page,
        }
