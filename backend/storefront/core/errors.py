"""
API error types, storage error translation and exception handlers.

- Defines a small hierarchy of ApiError exceptions.
- translate_storage_error() maps storage error variants to ApiErrors.
- Renders every error with the same JSON shape: {"error": "<message>"}.
- Registers FastAPI exception handlers.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.db.errors import ForeignKeyViolation, NotFound, Other, StorageError, UniqueViolation
from storefront.schemas.common import ErrorResponse

__all__ = [
    "ApiError",
    "BadRequestError",
    "NotFoundError",
    "ConflictError",
    "InternalError",
    "translate_storage_error",
    "register_exception_handlers",
]

log = logging.getLogger(__name__)

_GENERIC_CONFLICT = "Unique constraint violation (a record with this value already exists)."
_GENERIC_NOT_FOUND = "Record not found."
_GENERIC_SERVER_ERROR = "Internal server error."


# -------------------------------
# Exception types
# -------------------------------

class ApiError(Exception):
    """
    Base API error with HTTP status.
    """
    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    status_code = 409


class InternalError(ApiError):
    status_code = 500


# -------------------------------
# Storage error translation
# -------------------------------

def translate_storage_error(
    exc: StorageError,
    *,
    not_found: str = _GENERIC_NOT_FOUND,
    conflict: str = _GENERIC_CONFLICT,
    read_only: bool = False,
    fallback: str = _GENERIC_SERVER_ERROR,
) -> ApiError:
    """
    Map a storage error variant to the ApiError returned to the client.

    - UniqueViolation                 -> 409 with `conflict`
    - NotFound / ForeignKeyViolation  -> 404 with `not_found`
    - Other                           -> 400 with the storage message, or 500 with
                                         `fallback` when the operation is read-only
    """
    if isinstance(exc, UniqueViolation):
        log.warning("Unique constraint violated", extra={"constraint": exc.constraint, "detail": exc.message})
        return ConflictError(conflict)
    if isinstance(exc, (NotFound, ForeignKeyViolation)):
        log.warning("Referenced record not found", extra={"detail": exc.message})
        return NotFoundError(not_found)
    if isinstance(exc, Other):
        log.error("Storage operation failed", extra={"detail": exc.message, "read_only": read_only})
        if read_only:
            return InternalError(fallback)
        return BadRequestError(exc.message or fallback)
    raise TypeError(f"Unhandled storage error variant: {type(exc).__name__}")


# -------------------------------
# Handlers
# -------------------------------

def _error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first: dict[str, Any] = errors[0]
    loc = tuple(first.get("loc") or ())
    if first.get("type") == "missing" and loc == ("body",):
        return "Request body is required."
    if first.get("type") == "json_invalid":
        return "Malformed JSON body."
    msg = str(first.get("msg") or "Invalid request.")
    # Messages raised from our model validators come prefixed by pydantic
    if msg.startswith("Value error, "):
        return msg[len("Value error, "):]
    where = ".".join(str(part) for part in loc if part != "body")
    return f"{where}: {msg}" if where else msg


async def api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, ApiError):
        return _error_response(exc.status_code, exc.message)
    return await unhandled_error_handler(request, exc)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Request validation failures are client errors (400), not 422."""
    if isinstance(exc, RequestValidationError):
        return _error_response(400, _validation_message(exc))
    return await unhandled_error_handler(request, exc)


async def http_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Keep framework errors (unknown route, wrong method) in the same JSON shape."""
    if isinstance(exc, StarletteHTTPException):
        detail: Optional[Any] = exc.detail
        response = _error_response(exc.status_code, str(detail) if detail else "Request failed.")
        if exc.headers:
            response.headers.update(exc.headers)
        return response
    return await unhandled_error_handler(request, exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception(
        "Unhandled error",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return _error_response(500, _GENERIC_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers on the FastAPI app.
    """
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
