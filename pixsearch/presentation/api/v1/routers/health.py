"""
Health check API endpoints
"""

import time
from datetime import datetime

from fastapi import APIRouter

from pixsearch.core.config import settings
from pixsearch.presentation.api.v1.schemas.search import HealthStatus

router = APIRouter(tags=["health"])

_START_TIME = time.time()


@router.get("/health", response_model=HealthStatus)
async def health_check():
    """
    Health check endpoint that returns service status
    """
    return HealthStatus(
        status="healthy",
        timestamp=datetime.now(),
        uptime=time.time() - _START_TIME,
        search_configured=bool(settings.pixabay_api_key),
    )


@router.get("/")
async def root():
    """
    Root endpoint
    """
    return {"message": "Image Search API is running", "status": "healthy"}
