"""Translation of errors into HTTP responses.

Use cases and services raise; this is the only place that turns an
exception into a status code and a ``{message, errors?}`` body.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from qna.domain.error import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from qna.util.jwt import JWTError


def _error_body(message: str, errors: list[dict] | None = None) -> dict:
    body: dict = {"message": message}
    if errors is not None:
        body["errors"] = errors
    return body


def request_error_path(loc: tuple) -> str:
    """Render a request validation location as a dotted path.

    A missing property is reported on its parent (``.body``), a malformed
    one on itself (``.body.tags``).
    """
    parts = [str(part) for part in loc]
    return "." + ".".join(parts)


def _request_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        if error.get("type") == "missing" and len(loc) > 1:
            loc = loc[:-1]
        errors.append(
            {
                "path": request_error_path(loc),
                "message": error.get("msg", ""),
                "errorCode": error.get("type", "invalid"),
            }
        )
    return errors


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = _request_errors(exc)
    logfire.warn("Request validation failed", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation failed", errors),
    )


async def handle_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    errors = [
        {"path": e.path, "message": e.message, "errorCode": e.error_code}
        for e in exc.errors
    ]
    logfire.warn("Entity validation failed", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation failed", errors),
    )


async def handle_bad_request(request: Request, exc: Exception) -> JSONResponse:
    # Conflict and authentication failures share a generic 400
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(str(exc))
    )


async def handle_unauthorized(request: Request, exc: Exception) -> JSONResponse:
    logfire.warn("Unauthorized request", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content=_error_body(str(exc))
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=_error_body(f"{exc.resource} not found"),
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(
        RequestValidationError, handle_request_validation_error
    )
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(ConflictError, handle_bad_request)
    app.add_exception_handler(AuthenticationError, handle_bad_request)
    app.add_exception_handler(AuthorizationError, handle_unauthorized)
    app.add_exception_handler(JWTError, handle_unauthorized)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
