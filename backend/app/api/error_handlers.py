"""Error Handlers: global exception handlers for the People API.

Invariants:
    - PeopleError → its own http_status with {message, timestamp}
    - RequestValidationError → 400 with the same body shape, field errors aggregated
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PeopleError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py so tests can build an app with the same handlers
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import PeopleError
from app.core.person_rules import format_field_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_people_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_people_error_handler(app: FastAPI) -> None:
    """Register People domain/infrastructure error handler."""

    @app.exception_handler(PeopleError)
    async def people_error_handler(request: Request, exc: PeopleError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"PeopleError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(format_field_errors(exc.errors())),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("An unexpected error occurred"),
        )


def _error_body(message: str) -> dict:
    return {
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
