from .image_search_pixabay import PixabaySearchClient

__all__ = [
    "PixabaySearchClient",
]
