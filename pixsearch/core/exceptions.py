"""
Custom exception handlers and error types
"""

from fastapi import Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import logging
import traceback
from typing import Optional

logger = logging.getLogger(__name__)


class SearchError(Exception):
    """Base exception for image search failures"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class TransportError(SearchError):
    """Exception raised when the search request could not be completed.

    Covers network failures, timeouts, non-success status codes and
    responses that are not served as JSON.

    Args:
        message (str): Error message
        status (Optional[int]): HTTP status of the response (if any)
        url (Optional[str]): Requested endpoint
    Example:
        raise TransportError("HTTP 503", status=503, url="https://pixabay.com/api/")
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message, "TRANSPORT_ERROR")
        self.status = status
        self.url = url


class DecodeError(SearchError):
    """Exception raised when the response body is not the expected JSON shape"""

    def __init__(self, message: str):
        super().__init__(message, "DECODE_ERROR")


class ConfigurationError(SearchError):
    """Exception raised when configuration is invalid"""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning("Validation error: %s", exc.errors())
    return JSONResponse(
        status_code=422,
        content={
            "detail": {
                "error": "Validation error",
                "details": "Invalid request data",
                "errors": jsonable_encoder(exc.errors()),
            }
        },
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format"""
    logger.warning("HTTP exception: %s - %s", exc.status_code, exc.detail)

    # Ensure detail is in our standard format
    if isinstance(exc.detail, dict):
        detail = exc.detail
    else:
        detail = {"error": "HTTP Error", "details": str(exc.detail)}

    return JSONResponse(status_code=exc.status_code, content={"detail": detail})


async def search_exception_handler(request: Request, exc: SearchError):
    """Handle upstream search failures"""
    logger.error("Image search error: %s", exc.message)
    status_code = 500 if isinstance(exc, ConfigurationError) else 502
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": {
                "error": "Image search failed",
                "details": exc.message,
                "error_code": exc.error_code,
            }
        },
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.error("Unexpected error: %s: %s", type(exc).__name__, exc)
    logger.error("Traceback: %s", traceback.format_exc())

    return JSONResponse(
        status_code=500,
        content={
            "detail": {
                "error": "Internal server error",
                "details": "An unexpected error occurred",
            }
        },
    )
