from __future__ import annotations

from typing import List, Protocol

from pixsearch.core.models import ImageResult


class IImageSearchClient(Protocol):
    """Adapter for paginated keyword image search.

    Implementations may call Pixabay or any compatible provider. The
    application layer should not know about concrete providers.
    """

    page_size: int

    async def search(self, query: str, page: int) -> List[ImageResult]:
        """Return one page of results for the query, in server order.

        An empty list means no matches. Failures raise TransportError or
        DecodeError instead of returning an empty list.
        """
        ...
