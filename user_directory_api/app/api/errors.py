"""
Error responses.

Every error leaves the service as ``{"error": "<message>"}``.  Handlers
raise ``HTTPException`` with one of the messages below and the
exception handlers registered by ``register_exception_handlers`` render
it.  Request validation failures (a body that is not a JSON object,
names that are not strings) are reported as a missing-field bad
request rather than FastAPI's default 422.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Bad Request - Missing required fields"
MISSING_USER_ID = "Bad Request - Missing user ID"
USER_NOT_FOUND = "Not Found - User not found"
INTERNAL_ERROR = "Internal Server Error"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": MISSING_FIELDS})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
