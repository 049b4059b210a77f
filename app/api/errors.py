"""HTTP error helpers producing the ``{success, error}`` envelope."""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.envelope import ApiError

logger = logging.getLogger(__name__)

INVALID_DATA = "Invalid data"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error envelope response."""

    return JSONResponse(status_code=status_code, content=ApiError(error=message).model_dump())


def not_found(message: str = "Invoice not found") -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def bad_request(message: str = INVALID_DATA) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request payload: %s", exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_DATA)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on ``app``."""

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
