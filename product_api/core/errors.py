"""Error taxonomy and the JSON error shape returned to clients."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_BODY_MESSAGE = "Request body must be a JSON object"


class ProductError(Exception):
    """Base class for failures that map to a client-visible status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ProductValidationError(ProductError):
    status_code = 400


class ProductNotFoundError(ProductError):
    status_code = 404

    def __init__(self, message: str = "Product not found"):
        super().__init__(message)


class PersistenceError(ProductError):
    """Raised when the collection could not be written back."""

    status_code = 500


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def _product_error_handler(request: Request, exc: ProductError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.message, exc.status_code)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _body_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(INVALID_BODY_MESSAGE, 400)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(INTERNAL_ERROR_MESSAGE, 500)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductError, _product_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _body_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
