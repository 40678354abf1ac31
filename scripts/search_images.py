#!/usr/bin/env python3
"""CLI runner for keyword image search.

Pages through a query and prints one JSON object per result to stdout.

Usage:
  python scripts/search_images.py "red fox" --pages 3
  python scripts/search_images.py cats --page-size 20 --api-key XXXX
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path so 'pixsearch' is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pixsearch.application.use_cases.browse_images import BrowseImagesUseCase
from pixsearch.core.config import settings
from pixsearch.core.exceptions import SearchError
from pixsearch.core.logging_config import setup_logging
from pixsearch.infrastructure.adapters import PixabaySearchClient

logger = logging.getLogger("search_images")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search images by keyword and print results as JSON lines",
    )
    parser.add_argument("query", help="Search text")
    parser.add_argument(
        "--pages",
        type=int,
        default=1,
        help="Maximum number of pages to fetch (default: 1)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Results per page (default: SEARCH_PAGE_SIZE setting)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="Pixabay API key (default: PIXABAY_API_KEY setting)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


async def run(
    query: str,
    *,
    pages: int,
    api_key: str,
    page_size: Optional[int] = None,
) -> int:
    """Fetch up to `pages` pages and print each result; return the result count."""
    client = PixabaySearchClient(
        api_key,
        base_url=settings.pixabay_base_url,
        page_size=page_size or settings.search_page_size,
        image_type=settings.search_image_type,
        timeout=settings.search_timeout,
    )
    async with client:
        browser = BrowseImagesUseCase(client)
        batch: Optional[List] = await browser.search(query)
        fetched = 1
        while True:
            for image in batch or []:
                print(json.dumps(image.to_dict(), ensure_ascii=False))
            if fetched >= pages or not browser.state.has_next_page:
                break
            batch = await browser.load_next_page()
            fetched += 1
        return len(browser.images)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # Log to stderr only; stdout carries the results
    setup_logging(log_file="", level="DEBUG" if args.verbose else "WARNING")

    query = args.query.strip()
    if not query:
        print("Query must not be blank", file=sys.stderr)
        return 2
    api_key = args.api_key or settings.pixabay_api_key
    if not api_key:
        print("Missing API key: pass --api-key or set PIXABAY_API_KEY", file=sys.stderr)
        return 2

    try:
        total = asyncio.run(
            run(query, pages=max(1, args.pages), api_key=api_key, page_size=args.page_size)
        )
    except SearchError as e:
        print(f"Search failed: {e.message}", file=sys.stderr)
        return 1

    logger.info("Fetched %d results for %r", total, query)
    return 0


if __name__ == "__main__":
    sys.exit(main())
