"""Mapping of errors to HTTP responses."""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog.domain.error import (
    DomainError,
    FieldError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


class ValidationFailedError(HTTPException):
    """400 response that lists every invalid field."""

    def __init__(self, errors: list[FieldError]):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Validation failed"
        )
        self.errors = errors


def to_http_error(error: DomainError) -> HTTPException:
    """Translate a domain error raised by a use case into an HTTP error.

    Args:
        error: Domain error

    Returns:
        HTTP exception to raise from the route
    """
    if isinstance(error, ValidationError):
        logfire.info("Validation failed", error=str(error))
        return ValidationFailedError(error.errors)

    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )

    if isinstance(error, InvalidCredentialsError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        )

    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {error.action} this {error.resource}",
        )

    logfire.error("Unhandled domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
    )


def _field_name(loc: tuple) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI adds
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def validation_failed_handler(
    request: Request, exc: ValidationFailedError
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "errors": [error.model_dump() for error in exc.errors],
        },
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies and query parameters like domain validation."""
    errors = [
        FieldError(field=_field_name(tuple(error["loc"])), message=error["msg"])
        for error in exc.errors()
    ]
    logfire.info("Request validation failed", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "errors": [error.model_dump() for error in errors],
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for unexpected errors. Internals are logged, never returned."""
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on the application."""
    app.add_exception_handler(ValidationFailedError, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
