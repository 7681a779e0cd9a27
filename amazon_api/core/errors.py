"""
Application-level error handling.

Only storage failures get a handler: they are logged once and
answered with an empty 500.  Not-found outcomes are not exceptions in
this code base; endpoints map them to 404 themselves.
"""

import logging
import sqlite3

from fastapi import FastAPI, Request, Response, status

logger = logging.getLogger(__name__)


async def storage_error_handler(request: Request, exc: Exception) -> Response:
    logger.error(
        "Storage failure on %s %s", request.method, request.url.path, exc_info=exc
    )
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the storage error handler to ``app``."""
    app.add_exception_handler(sqlite3.Error, storage_error_handler)
