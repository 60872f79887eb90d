"""Map domain errors and framework errors to ``{"error": <message>}`` responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.model.errors import (
    DomainError,
    DuplicateError,
    InternalError,
    InvalidCredentialsError,
    InvalidTokenError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific class first; lookup walks the exception's MRO
STATUS_CODES: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    InvalidTokenError: status.HTTP_401_UNAUTHORIZED,
    DuplicateError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(error: DomainError) -> int:
    for cls in type(error).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(
            "Request failed",
            exc_info=exc,
            extra={"path": request.url.path, "errorType": type(exc).__name__},
        )
        # Internal details stay in the log
        message = StorageError.default_message if isinstance(exc, StorageError) else InternalError.default_message
        return error_response(status_code, message)

    return error_response(status_code, exc.message)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or missing/non-string fields → 400."""
    message = "Invalid request body"
    errors = exc.errors()
    if errors and errors[0].get("type") == "json_invalid":
        message = "Invalid JSON body"
    elif errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        if field:
            message = f"Invalid request body: {field}: {first.get('msg', 'invalid')}"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path, "errorType": type(exc).__name__})
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.default_message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
