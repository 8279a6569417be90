"""
Exception handlers for FastAPI application.

This module provides:
- Domain exception handler (validation, not found, invalid transition)
- Application exception handler (conflicts, collaborator failures)
- Pydantic validation error handler (RequestValidationError)
- General unhandled exception handler (Exception)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from order_service.application.exceptions import (
    ApplicationError,
    ConflictError,
    ExternalServiceError,
)
from order_service.core.config import settings
from order_service.domain.exceptions import DomainException, OrderNotFoundError

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Any = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details if details is not None else {},
            },
            "meta": {
                "request_id": _request_id(request),
            },
        },
    )


def domain_status_code(exc: DomainException) -> int:
    """Map a domain exception to its HTTP status code."""
    if isinstance(exc, OrderNotFoundError):
        return status.HTTP_404_NOT_FOUND
    # CannotAdvanceOrderStatusError, OrderValidationError
    return status.HTTP_400_BAD_REQUEST


def application_status_code(exc: ApplicationError) -> int:
    """Map an application exception to its HTTP status code."""
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ExternalServiceError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """
    Handle domain exceptions.

    Not-found and invalid-transition errors are expected outcomes the caller
    can recover from; validation errors point at a bad request.
    """
    logger.warning(
        f"Domain exception: {exc.code} - {exc.message} "
        f"(request_id={_request_id(request) or 'unknown'})"
    )

    return _error_response(request, domain_status_code(exc), exc.code, exc.message)


async def application_exception_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle application exceptions.

    Collaborator failures are reported as 503 so clients know a retry may
    succeed.
    """
    status_code = application_status_code(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"Application exception: {exc.error_code} - {exc.message} "
        f"(request_id={_request_id(request) or 'unknown'})"
    )

    return _error_response(request, status_code, exc.error_code, exc.message, exc.details)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to consistent error response format.
    """
    logger.warning(
        f"Validation error: {exc.errors()} "
        f"(request_id={_request_id(request) or 'unknown'})"
    )

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    return _error_response(
        request,
        422,
        "VALIDATION_ERROR",
        "Request validation failed",
        errors,
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs the full error and returns a generic error response to the client
    (don't expose internal error details in production).
    """
    logger.error(
        f"Unexpected error: {str(exc)} "
        f"(request_id={_request_id(request) or 'unknown'})",
        exc_info=True,
    )

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        (
            "An unexpected error occurred. Please try again later."
            if not settings.debug
            else str(exc)
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the application."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(ApplicationError, application_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
