"""Exception handlers for the record store FastAPI application.

This module converts store exceptions into consistent JSON responses.
Every body is an ErrorResponse with unset fields left out.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.models import ErrorResponse
from models.store import RecordNotFoundError, RecordStateError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def record_not_found_handler(request: Request, exc: RecordNotFoundError):
    """Handle RecordNotFoundError exceptions.

    Returns a 404 naming the record type and identifier that were requested.

    Args:
        request: The incoming request that triggered the error.
        exc: The RecordNotFoundError exception.

    Returns:
        JSONResponse with 404 status.
    """
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        ErrorResponse(
            error="Record Not Found",
            detail=str(exc),
            type=exc.record_type,
            record_id=str(exc.record_id),
        ),
    )


async def record_state_handler(request: Request, exc: RecordStateError):
    """Handle RecordStateError exceptions.

    Returns a 409 (Conflict): the record exists but its current status
    doesn't allow the requested change.
    """
    return _error_response(
        status.HTTP_409_CONFLICT,
        ErrorResponse(error="Record State Conflict", detail=str(exc), type="RecordStateError"),
    )


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors raised outside request parsing."""
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorResponse(
            error="Validation Error",
            detail="The request data failed validation",
            validation_errors=exc.errors(include_url=False, include_context=False),
        ),
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle ValueError exceptions.

    ValueErrors indicate input values that passed request validation
    but failed a business rule.
    """
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error="Invalid Value", detail=str(exc), type="ValueError"),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    Logs the full traceback and returns a generic 500 so stack traces
    are not exposed to clients.
    """
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(
            error="Internal Server Error",
            detail="An unexpected error occurred",
            type=type(exc).__name__,
        ),
    )
