"""
Exception handlers for FastAPI.
"""
import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def validation_exception_handler(request: Request, exc: RequestValidationError):
    """A body that does not decode into a receipt is a client error (400)."""
    logger.info("Rejected request to %s: %d validation errors", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid receipt format",
            "details": jsonable_encoder(exc.errors()),
        },
    )
