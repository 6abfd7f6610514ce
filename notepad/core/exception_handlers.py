"""
HTTP rendering of errors.

Every error response body is exactly `{"message": ...}`. Application errors
keep their message unless they map to a 5xx, in which case the client sees
"Server error" and the detail only reaches the log. Request validation
failures become 400s naming the offending fields.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notepad.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    ConflictError,
    DatabaseError,
    DuplicateUserError,
    InvalidCredentialsError,
    NotFoundError,
    UserNotFoundError,
    ValidationError,
)
from notepad.core.logging import get_logger
from notepad.schemas.base import ErrorResponse

logger = get_logger(__name__)

# Looked up along the exception's MRO; unlisted kinds are 500
EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    ValidationError: 400,
    DuplicateUserError: 400,
    InvalidCredentialsError: 400,
    AuthenticationError: 401,
    NotFoundError: 404,
    UserNotFoundError: 404,
    ConflictError: 409,
    DatabaseError: 500,
}

INTERNAL_ERROR_MESSAGE = "Server error"


def _get_request_id(request: Request) -> str | None:
    """The id set by the request middleware, else the client's header."""
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id")


def _status_for(exc: ApplicationError) -> int:
    for kind in type(exc).__mro__:
        if kind in EXCEPTION_STATUS_MAP:
            return EXCEPTION_STATUS_MAP[kind]
    return 500


def _message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


def _request_fields(request: Request) -> dict[str, str | None]:
    return {
        "path": request.url.path,
        "method": request.method,
        "request_id": _get_request_id(request),
    }


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    status_code = _status_for(exc)
    fields = {"code": exc.code, "detail": exc.message, "status": status_code, **_request_fields(request)}

    if status_code >= 500:
        logger.error("Request failed", extra=fields)
        return _message_response(status_code, INTERNAL_ERROR_MESSAGE)

    logger.warning("Request rejected", extra=fields)
    return _message_response(status_code, exc.message)


def _field_name(error: dict) -> str:
    # json_invalid puts the byte offset of the syntax error in loc, not a field
    if error.get("type") == "json_invalid":
        return "body"
    return ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "body"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """400 naming each invalid field once, in the order pydantic reported them."""
    fields = list(dict.fromkeys(_field_name(error) for error in exc.errors()))

    logger.warning("Request validation failed", extra={"fields": fields, **_request_fields(request)})
    return _message_response(400, f"Please provide valid values for: {', '.join(fields)}")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled exception",
        extra={"exception_type": type(exc).__name__, **_request_fields(request)},
    )
    return _message_response(500, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
