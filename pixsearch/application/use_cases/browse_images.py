from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from pixsearch.application.interfaces import IImageSearchClient
from pixsearch.application.pagination import SearchState
from pixsearch.core.exceptions import SearchError
from pixsearch.core.models import ImageResult

logger = logging.getLogger(__name__)


class BrowseImagesUseCase:
    """Drive a search session: run a query, then append further pages.

    Holds the accumulated results and the SearchState for the current
    query. A newer query supersedes any fetch still in flight for an older
    one; the superseded call returns None and leaves state untouched.
    Client errors propagate unchanged. A failed next page leaves state
    untouched; a failed first page forgets the query so it can be retried.
    """

    def __init__(self, client: IImageSearchClient) -> None:
        self._client = client
        self.state = SearchState()
        self.images: List[ImageResult] = []
        self._generation = 0
        self._inflight: Optional[asyncio.Future] = None

    @property
    def page_size(self) -> int:
        return self._client.page_size

    async def search(self, query: str) -> Optional[List[ImageResult]]:
        """Start a new query at page 1 and replace the accumulated results.

        Blank or unchanged queries are a no-op returning current results.
        """
        if not query or not query.strip() or not self.state.is_new_query(query):
            return self.images

        self._supersede()
        generation = self._generation
        self.state.reset(query)
        self.images = []

        try:
            results = await self._fetch(query, 1, generation)
        except SearchError:
            # Forget the query so the same text can be retried
            if generation == self._generation:
                self.state.last_query = None
            raise
        if results is None:
            return None

        self.images = list(results)
        self.state.record_page(1, len(results), self.page_size)
        logger.info(
            "Query %r: %d results on first page (more=%s)",
            query,
            len(results),
            self.state.has_next_page,
        )
        return self.images

    async def load_next_page(self) -> Optional[List[ImageResult]]:
        """Fetch and append the next page for the current query.

        Returns only the newly fetched results; an empty list when there is
        nothing more to load or a fetch is already in flight.
        """
        query = self.state.last_query
        if query is None or not self.state.has_next_page:
            return []
        if self._inflight is not None and not self._inflight.done():
            logger.debug("Fetch already in flight for %r; skipping next page", query)
            return []

        generation = self._generation
        page = self.state.next_page
        results = await self._fetch(query, page, generation)
        if results is None:
            return None

        self.images.extend(results)
        self.state.record_page(page, len(results), self.page_size)
        logger.info(
            "Query %r: page %d added %d results (more=%s)",
            query,
            page,
            len(results),
            self.state.has_next_page,
        )
        return list(results)

    def _supersede(self) -> None:
        self._generation += 1
        if self._inflight is not None and not self._inflight.done():
            logger.debug("Cancelling in-flight search superseded by a newer query")
            self._inflight.cancel()
        self._inflight = None

    async def _fetch(
        self, query: str, page: int, generation: int
    ) -> Optional[List[ImageResult]]:
        task = asyncio.ensure_future(self._client.search(query, page))
        self._inflight = task
        try:
            results = await task
        except asyncio.CancelledError:
            if generation == self._generation:
                raise
            logger.debug("Search q=%r page=%d superseded", query, page)
            return None
        except SearchError:
            if generation != self._generation:
                logger.debug("Ignoring failure of superseded search q=%r", query)
                return None
            raise
        finally:
            if self._inflight is task:
                self._inflight = None

        if generation != self._generation:
            logger.debug("Discarding stale results for q=%r page=%d", query, page)
            return None
        return results
