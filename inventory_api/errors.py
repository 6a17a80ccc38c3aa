"""
Exception handlers.

Every error leaves the API as ``{"error": <message>}``. Handlers are
registered on the application by ``register_exception_handlers``.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"
MISSING_FIELDS = "Missing required fields"
INVALID_FIELDS = "Invalid field values"

# pydantic error types meaning "the client did not supply a usable value"
_ABSENT_ERROR_TYPES = {"missing", "string_too_short"}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _is_absent(error: dict) -> bool:
    return error["type"] in _ABSENT_ERROR_TYPES or error.get("input") is None


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Map request validation failures to client errors.

    A malformed path id cannot name an existing product, so it is reported
    the same way as an unknown one. Body errors are 400s.
    """
    errors = exc.errors()

    if any(err["loc"] and err["loc"][0] == "path" for err in errors):
        return error_response(status.HTTP_404_NOT_FOUND, PRODUCT_NOT_FOUND)

    if any(_is_absent(err) for err in errors):
        return error_response(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS)

    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_FIELDS)


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    # Surface the driver's own message, not SQLAlchemy's wrapper text
    message = str(getattr(exc, "orig", None) or exc)
    logger.error(f"Database error on {request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or exc.__class__.__name__)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
