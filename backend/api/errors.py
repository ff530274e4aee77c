"""
Exception handlers.

Module exceptions carry their HTTP status (``LinkoraError.status_code``);
this handler turns them into responses with the ``ErrorResponse`` body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.exceptions import LinkoraError
from .models import ErrorResponse

logger = logging.getLogger(__name__)


async def linkora_error_handler(request: Request, exc: LinkoraError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.from_error(exc).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LinkoraError, linkora_error_handler)
