"""Exception handlers rendering API errors as JSON."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ideapool.domain.error import (
    ErrorCategory,
    ErrorKind,
    IdeaPoolError,
    RequestError,
)


def error_response(error: IdeaPoolError) -> JSONResponse:
    """Render an error as ``{name, type, status, message}``."""
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def idea_pool_error_handler(
    request: Request, exc: IdeaPoolError
) -> JSONResponse:
    if exc.status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            kind=exc.kind.value,
            error=exc.message,
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            kind=exc.kind.value,
            status=exc.status_code,
        )
    return error_response(exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report the first unusable part of a request body.

    A missing body property becomes ``MISSING_PROPERTY`` naming it. Anything
    else, such as a body that is not JSON, is an ``INVALID_REQUEST``.
    """
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = [str(part) for part in first.get("loc", ())]

    if first.get("type") == "missing":
        field = loc[-1] if len(loc) > 1 else "request body"
        error = RequestError(ErrorKind.MISSING_PROPERTY, f"Please provide {field}")
    else:
        error = RequestError(ErrorKind.INVALID_REQUEST, first.get("msg"))
    logfire.info(
        "Request validation failed",
        path=request.url.path,
        kind=error.kind.value,
        loc=loc,
    )
    return error_response(error)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(RequestError(ErrorKind.ENDPOINT_NOT_FOUND))
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "name": "HTTP_ERROR",
            "type": ErrorCategory.REQUEST.value,
            "status": exc.status_code,
            "message": str(exc.detail),
        },
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error("Unhandled error", path=request.url.path, error=str(exc))
    return error_response(RequestError(ErrorKind.INTERNAL_SERVER_ERROR))


def register_exception_handlers(app: FastAPI) -> None:
    """Register every handler on the application."""
    app.add_exception_handler(IdeaPoolError, idea_pool_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
