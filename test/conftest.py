"""
Shared test configuration and fixtures for the image search package.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import pytest

from pixsearch.core.models import ImageResult


def setup_logging():
    """Console logging for the whole test run."""
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicate lines
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)

    # Quiet noisy libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("pixsearch").setLevel(logging.DEBUG)


def pytest_configure(config):  # pylint: disable=unused-argument
    setup_logging()


@pytest.fixture(autouse=True)
def log_test_name(request):
    """Log test name when test starts and finishes."""
    logger = logging.getLogger(request.node.nodeid)
    logger.info("Starting test: %s", request.node.name)
    start_time = datetime.now()

    def log_test_end():
        duration = (datetime.now() - start_time).total_seconds()
        has_rep_call = hasattr(request.node, "rep_call")
        if has_rep_call and request.node.rep_call.failed:
            logger.error("Test failed after %.2fs", duration)
        else:
            logger.info("Test finished after %.2fs", duration)

    request.addfinalizer(log_test_end)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Add test result to report object."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


# -------------------- Search fixtures --------------------
def build_hit(idx: int = 0, **overrides: Any) -> Dict[str, Any]:
    """A fully populated hit as served by the search endpoint."""
    hit = {
        "id": 1000 + idx,
        "webformatURL": f"https://cdn.example.com/{idx}_640.jpg",
        "largeImageURL": f"https://cdn.example.com/{idx}_1280.jpg",
        "tags": "cat, animal, pet",
        "user": f"user{idx}",
        "comments": 3 + idx,
        "likes": 40 + idx,
        "downloads": 500 + idx,
    }
    hit.update(overrides)
    return hit


def build_result(idx: int = 0) -> ImageResult:
    return ImageResult(
        preview_url=f"https://cdn.example.com/{idx}_640.jpg",
        full_url=f"https://cdn.example.com/{idx}_1280.jpg",
        tags="cat, animal, pet",
        attribution=f"Uploaded by: @user{idx}",
        stats=f"{3 + idx} Comments, {40 + idx} Likes, {500 + idx} Downloads",
    )


@pytest.fixture
def make_hit():
    return build_hit


@pytest.fixture
def make_results():
    def _make(count: int, start: int = 0) -> List[ImageResult]:
        return [build_result(i) for i in range(start, start + count)]

    return _make


class FakeSearchClient:
    """In-memory IImageSearchClient.

    `pages` maps (query, page) to a list of results or an exception to raise.
    Missing keys yield an empty page. An event in `gates` is awaited before
    answering so tests can keep a request in flight.
    """

    def __init__(self, page_size: int = 3, pages: Optional[Dict] = None) -> None:
        self.page_size = page_size
        self.pages = dict(pages or {})
        self.calls: List[tuple] = []
        self.gates: Dict[tuple, asyncio.Event] = {}

    async def search(self, query: str, page: int) -> List[ImageResult]:
        self.calls.append((query, page))
        gate = self.gates.get((query, page))
        if gate is not None:
            await gate.wait()
        outcome = self.pages.get((query, page), [])
        if isinstance(outcome, BaseException):
            raise outcome
        return list(outcome)


@pytest.fixture
def fake_client():
    return FakeSearchClient()
