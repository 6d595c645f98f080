"""Translate domain and request validation errors into HTTP responses.

Routes let errors propagate; the handlers registered here map them to
status codes in one place.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from circle.domain.error import (
    InvalidInputError,
    NotFoundError,
    RelationshipConflictError,
)


async def handle_not_found(request: Request, exc: Exception) -> JSONResponse:
    """404 for unknown users."""
    logfire.warn("Not found", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def handle_conflict(request: Request, exc: Exception) -> JSONResponse:
    """409 for duplicate usernames and friendship rule violations."""
    logfire.warn("Relationship conflict", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
    )


async def handle_invalid_input(request: Request, exc: Exception) -> JSONResponse:
    """400 for missing arguments that reached the domain."""
    logfire.warn("Invalid input", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


async def handle_request_validation(request: Request, exc: Exception) -> JSONResponse:
    """400 for malformed bodies, path IDs and query parameters.

    Each entry of ``errors`` is ``"<location>: <message>"``, e.g.
    ``"query.friendId: Field required"``.
    """
    errors = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()  # type: ignore[attr-defined]
    ]
    logfire.warn("Request validation failed", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": errors},
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """500 without leaking internals; the details only go to the log."""
    logfire.exception(
        "Unexpected error", path=request.url.path, error_type=type(exc).__name__
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error: An unexpected error occurred"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(RelationshipConflictError, handle_conflict)
    app.add_exception_handler(InvalidInputError, handle_invalid_input)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
