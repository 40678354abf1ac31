from datetime import datetime
from typing import List

from pydantic import BaseModel

from pixsearch.core.models import ImageResult


class ImageResultSchema(BaseModel):
    preview_url: str
    full_url: str
    tags: str
    tag_list: List[str]
    attribution: str
    stats: str

    @classmethod
    def from_result(cls, result: ImageResult) -> "ImageResultSchema":
        return cls(tag_list=result.tag_list, **result.to_dict())


class SearchPageResponse(BaseModel):
    query: str
    page: int
    per_page: int
    count: int
    has_next_page: bool
    results: List[ImageResultSchema]


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
    uptime: float
    search_configured: bool
