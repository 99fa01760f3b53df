"""
Error envelope shared by every route.

Every failure leaves the API as
``{"status": "error", "message": <str>, "error": <detail or null>}``
with the status code chosen at the raise site.
"""
import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(StarletteHTTPException):
    """HTTPException that also carries a low-level error string for the envelope."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Optional[Any] = None,
        headers: Optional[dict] = None,
    ):
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.error = error


class ProviderError(Exception):
    """An external AI provider call failed."""


class ProviderUnavailable(ProviderError):
    """The provider is not configured (missing API key)."""


def error_body(message: str, error: Optional[Any] = None) -> dict:
    return {"status": "error", "message": message, "error": error}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    error = getattr(exc, "error", None)
    if error is None and not isinstance(exc.detail, str):
        error = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(error_body(message, error)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    missing = any(err.get("type") == "missing" for err in errors)
    message = "Missing required fields" if missing else "Invalid request"
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in errors
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(error_body(message, details)),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body("Conflicting or invalid reference", str(exc.orig)),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
