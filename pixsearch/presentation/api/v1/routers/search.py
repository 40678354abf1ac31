import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from pixsearch.application.interfaces import IImageSearchClient
from pixsearch.application.pagination import has_more_pages
from pixsearch.presentation.api.v1.dependencies.search import get_search_client
from pixsearch.presentation.api.v1.schemas.search import (
    ImageResultSchema,
    SearchPageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/images")


@router.get("/search", response_model=SearchPageResponse)
async def search_images(
    q: str = Query(..., min_length=1, description="Search text"),
    page: int = Query(1, ge=1, description="1-based page number"),
    client: IImageSearchClient = Depends(get_search_client),
):
    """Return one page of image results for the query.

    Upstream failures surface as 502 through the SearchError handler, so an
    empty `results` list always means no matches.
    """
    query = q.strip()
    if not query:
        raise HTTPException(
            status_code=422,
            detail={"error": "Validation error", "details": "Query must not be blank"},
        )

    results = await client.search(query, page)
    count = len(results)
    return SearchPageResponse(
        query=query,
        page=page,
        per_page=client.page_size,
        count=count,
        has_next_page=has_more_pages(count, client.page_size),
        results=[ImageResultSchema.from_result(r) for r in results],
    )
