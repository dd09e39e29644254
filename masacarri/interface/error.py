"""Interface layer errors and their HTTP rendering.

Every error leaves the API as ``{"message": ...}``. Internal errors are
logged with full detail and rendered with a fixed message.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from masacarri.domain.error import (
    InternalError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

SYSTEM_ERROR_MESSAGE = "system error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render an error body."""
    return JSONResponse(status_code=status_code, content={"message": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def handle_validation_error(request: Request, exc: ValidationError):
    logfire.info("Request rejected", path=request.url.path, message=exc.message)
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
):
    message = _describe_validation_error(exc)
    logfire.info("Malformed request", path=request.url.path, message=message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_not_found(request: Request, exc: NotFoundError):
    return error_response(status.HTTP_404_NOT_FOUND, f"{exc.resource} not found")


async def handle_not_authorized(request: Request, exc: NotAuthorizedError):
    return error_response(status.HTTP_401_UNAUTHORIZED, exc.message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_internal_error(request: Request, exc: Exception):
    logfire.error(
        "Internal error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        _exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SYSTEM_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the ``{"message"}`` error handlers on an application."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(NotAuthorizedError, handle_not_authorized)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(InternalError, handle_internal_error)
    app.add_exception_handler(Exception, handle_internal_error)
