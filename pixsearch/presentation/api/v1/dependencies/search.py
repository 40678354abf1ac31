from fastapi import Request

from pixsearch.application.interfaces import IImageSearchClient
from pixsearch.core.config import settings
from pixsearch.infrastructure.adapters import PixabaySearchClient


def get_search_client(request: Request) -> IImageSearchClient:
    """Return the app-wide search client, composing it from settings on first use.

    Raises ConfigurationError when no API key is configured.
    """
    client = getattr(request.app.state, "search_client", None)
    if client is None:
        client = PixabaySearchClient.from_settings(settings)
        request.app.state.search_client = client
    return client
