"""
Error taxonomy and the single place that turns errors into HTTP responses.

"Not found" is deliberately absent here: lookups return `None` and the
route serializes that as JSON `null` with status 200.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Any failure coming from the database or its driver."""


class RequestTimeout(RuntimeError):
    def __init__(self, message: str = "request timed out") -> None:
        super().__init__(message)


class RouteNotFound(RuntimeError):
    def __init__(self, message: str = "nothing to see here") -> None:
        super().__init__(message)


STATUS_BY_ERROR: dict[type[Exception], int] = {
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    RequestTimeout: status.HTTP_408_REQUEST_TIMEOUT,
    RouteNotFound: status.HTTP_404_NOT_FOUND,
}


def status_for(exc: Exception) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_response(exc: Exception) -> Response:
    """
    Map an error to a plain-text response whose body is the error description.
    """
    return PlainTextResponse(str(exc), status_code=status_for(exc))


async def _store_error_handler(request: Request, exc: Exception) -> Response:
    logger.warning("store_error method=%s path=%s error=%s", request.method, request.url.path, exc)
    return to_response(exc)


async def _http_error_handler(request: Request, exc: Exception) -> Response:
    # Handlers never raise 404 themselves, so any 404 here is an unmatched route.
    if isinstance(exc, StarletteHTTPException) and exc.status_code == status.HTTP_404_NOT_FOUND:
        return to_response(RouteNotFound())
    return await http_exception_handler(request, exc)


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
