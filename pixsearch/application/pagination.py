"""
Caller-side pagination state for keyword searches
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def has_more_pages(result_count: int, page_size: int) -> bool:
    """A page shorter than the requested size is the last one.

    The endpoint exposes no total count, so this is the only signal.
    """
    return result_count >= page_size


@dataclass(slots=True)
class SearchState:
    """Caller-owned pagination state for one search session."""

    last_query: Optional[str] = None
    current_page: int = 1
    has_next_page: bool = True

    def is_new_query(self, query: str) -> bool:
        return query != self.last_query

    def reset(self, query: str) -> None:
        self.last_query = query
        self.current_page = 1
        self.has_next_page = True

    @property
    def next_page(self) -> int:
        return self.current_page + 1

    def record_page(self, page: int, result_count: int, page_size: int) -> None:
        """Apply the outcome of a successful fetch of `page`.

        The page counter only moves on a non-empty result; any short page
        (including an empty one) ends pagination for this query.
        """
        if result_count > 0:
            self.current_page = page
        if not has_more_pages(result_count, page_size):
            self.has_next_page = False
