"""Translation of domain failures into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookmatch.domain.exceptions import (
    BookmatchError,
    DuplicateBookError,
    DuplicateUserError,
    InvalidRequestError,
    NotFoundError,
    PermissionDeniedError,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong, please try again"

_STATUS_BY_ERROR: tuple[tuple[type[BookmatchError], int], ...] = (
    (InvalidRequestError, status.HTTP_400_BAD_REQUEST),
    (DuplicateUserError, status.HTTP_400_BAD_REQUEST),
    (DuplicateBookError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
)


def to_http_exception(exc: BookmatchError) -> HTTPException:
    """Return the :class:`HTTPException` matching the domain error ``exc``."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def domain_exception_handler(request: Request, exc: BookmatchError) -> JSONResponse:
    http_exc = to_http_exception(exc)
    return _error_response(http_exc.status_code, str(http_exc.detail))


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error while handling %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_400_BAD_REQUEST, GENERIC_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error body as ``{"error": message}``."""

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(BookmatchError, domain_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)


__all__ = ["GENERIC_ERROR_MESSAGE", "register_exception_handlers", "to_http_exception"]
