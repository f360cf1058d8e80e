"""
Exception handlers.

Maps the TravlingError hierarchy to HTTP responses. Store failures are
logged with context and returned as an opaque 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import StoreError, TravlingError

logger = logging.getLogger(__name__)


async def travling_error_handler(request: Request, exc: TravlingError) -> JSONResponse:
    """Render a domain error with its mapped status code."""
    if isinstance(exc, StoreError):
        # Logged with its traceback where it was raised
        logger.debug(
            "Store failure on %s %s: %s %s",
            request.method, request.url.path, exc.message, exc.details,
        )
    elif exc.status_code >= 500:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies as 400 instead of FastAPI's 422."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Invalid request",
            "details": {"errors": jsonable_encoder(exc.errors())},
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on an application."""
    app.add_exception_handler(TravlingError, travling_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
