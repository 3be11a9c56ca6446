"""
SchoolHub API Response Utilities
Standardized response format and error handling
"""
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from datetime import datetime
import traceback

from .errors import SchoolHubError
from .logging_config import api_logger


# ============================================================
# EXCEPTION HANDLERS
# ============================================================

def _timestamp() -> str:
    return datetime.utcnow().isoformat() + "Z"


async def api_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for API errors"""

    # Handle domain errors raised by the services
    if isinstance(exc, SchoolHubError):
        api_logger.warning(
            f"API Error: {exc.message}",
            status_code=exc.status_code,
            error_code=exc.error_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "ok": False,
                "error": exc.message,
                "error_code": exc.error_code,
                "details": exc.details,
                "timestamp": _timestamp(),
            }
        )

    # Handle HTTPException
    if isinstance(exc, HTTPException):
        api_logger.warning(
            f"HTTP Error: {exc.detail}",
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "ok": False,
                "error": exc.detail,
                "error_code": f"HTTP_{exc.status_code}",
                "timestamp": _timestamp(),
            },
            headers=getattr(exc, "headers", None),
        )

    # Handle unexpected errors
    api_logger.error(
        f"Unexpected error: {exc}",
        error=exc,
        path=request.url.path,
        traceback=traceback.format_exc(),
    )
    return JSONResponse(
        status_code=500,
        content={
            "ok": False,
            "error": "An unexpected error occurred",
            "error_code": "INTERNAL_ERROR",
            "timestamp": _timestamp(),
        }
    )
