from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional

import aiohttp

from pixsearch.application.interfaces import IImageSearchClient
from pixsearch.core.config import Settings
from pixsearch.core.exceptions import ConfigurationError, DecodeError, TransportError
from pixsearch.core.models import DEFAULT_PAGE_SIZE, ImageResult, SearchRequest
from pixsearch.utils.hit_decoding import decode_hits

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class PixabaySearchClient(IImageSearchClient):
    """IImageSearchClient implementation using the Pixabay API.

    One GET per call, no retries and no caching. The only state kept across
    calls is the configuration and the lazily created HTTP session.

    Pass `session` to share an aiohttp.ClientSession owned elsewhere; it is
    then never closed by this client.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://pixabay.com/api/",
        page_size: int = DEFAULT_PAGE_SIZE,
        image_type: str = "photo",
        timeout: float = 10.0,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.api_key = api_key
        self.base_url = base_url
        self.page_size = page_size
        self.image_type = image_type
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "PixabaySearchClient":
        if not settings.pixabay_api_key:
            raise ConfigurationError(
                "Pixabay API key is not configured", config_key="pixabay_api_key"
            )
        return cls(
            settings.pixabay_api_key,
            base_url=settings.pixabay_base_url,
            page_size=settings.search_page_size,
            image_type=settings.search_image_type,
            timeout=settings.search_timeout,
            **kwargs,
        )

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "PixabaySearchClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def search(self, query: str, page: int) -> List[ImageResult]:
        request = SearchRequest(query=query, page=page, page_size=self.page_size)
        params = request.to_params(self.api_key, self.image_type)
        payload = await self._fetch_json(params)
        results = decode_hits(payload)
        logger.debug(
            "Search q=%r page=%d returned %d results", query, page, len(results)
        )
        return results

    async def _fetch_json(self, params: dict) -> Any:
        session = self._get_session()
        logger.debug("GET %s page=%s per_page=%s", self.base_url, params["page"], params["per_page"])
        try:
            async with session.get(
                self.base_url,
                params=params,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                if not 200 <= response.status < 300:
                    logger.warning(
                        "Search request failed with HTTP %d", response.status
                    )
                    raise TransportError(
                        f"Search request failed with HTTP {response.status}",
                        status=response.status,
                        url=self.base_url,
                    )
                if response.content_type != JSON_CONTENT_TYPE:
                    logger.warning(
                        "Unexpected content type from search: %s", response.content_type
                    )
                    raise TransportError(
                        f"Unexpected content type: {response.content_type}",
                        status=response.status,
                        url=self.base_url,
                    )
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise DecodeError(f"Response body is not valid JSON: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("Search request to %s failed: %s", self.base_url, e)
            raise TransportError(
                f"Search request failed: {e}", url=self.base_url
            ) from e
