"""Error Handlers - map failures to HTTP responses for the hero lookup API.

Invariants:
    - HeroLookupError -> its own http_status with the structured error envelope
    - Any other exception -> 500 INTERNAL_ERROR; exception text only reaches the log
    - "Hero not found" never arrives here: the name route answers it with an empty 404

Design Decisions:
    - Two layers only: routes take a single str path parameter, so there is no
      request body or query to fail validation
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from hero_lookup.core.errors import ErrorCategory, ErrorSeverity, HeroLookupError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_RESPONSE = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


async def handle_hero_lookup_error(request: Request, exc: HeroLookupError):
    logger.error(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "hero_id": exc.context.hero_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}: {exc}",
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_RESPONSE,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain and catch-all handlers on app."""
    app.add_exception_handler(HeroLookupError, handle_hero_lookup_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
