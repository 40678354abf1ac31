from .image_search import IImageSearchClient

__all__ = [
    "IImageSearchClient",
]
