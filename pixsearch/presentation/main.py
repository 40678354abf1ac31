import os
import logging

from fastapi import FastAPI, APIRouter
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn
from contextlib import asynccontextmanager

from pixsearch.core.config import settings
from pixsearch.core.exceptions import (
    SearchError,
    general_exception_handler,
    http_exception_handler,
    search_exception_handler,
    validation_exception_handler,
)
from pixsearch.core.logging_config import setup_logging
from pixsearch.core.middleware import (
    RateLimitMiddleware,
    RequestLoggingMiddleware,
)
from pixsearch.presentation.api.v1.routers import health
from pixsearch.presentation.api.v1.routers import search

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    setup_logging()
    logger.info("Starting Image Search API...")
    yield
    client = getattr(app.state, "search_client", None)
    close = getattr(client, "close", None)
    if close is not None:
        await close()
    logger.info("Shutting down Image Search API...")


def create_application() -> FastAPI:
    """Create and configure FastAPI application"""

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.search_client = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        calls=settings.max_concurrent_requests,
        period=60,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SearchError, search_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include API routers under versioned prefix
    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(search.router, tags=["images"])
    api_v1.include_router(health.router)
    app.include_router(api_v1)

    return app


# Create application instance
app = create_application()

if __name__ == "__main__":
    dev_mode = os.getenv("DEV_MODE", "true").lower() == "true"
    uvicorn.run(
        "pixsearch.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=dev_mode,
    )
