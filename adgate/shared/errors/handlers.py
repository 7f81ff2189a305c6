"""
Centralized error handlers for FastAPI.

Maps signature, directory and request errors to HTTP responses.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adgate.application.directory.operations import failure_from_error
from adgate.domain.directory.errors import DirectoryError
from adgate.interfaces.directory.responses import respond
from adgate.shared.errors import RequestTooLargeError
from adgate.shared.security.signature import SignatureError

logger = logging.getLogger(__name__)

HTTP_401 = 401
HTTP_413 = 413
HTTP_500 = 500


def _error_response(status_code: int, error: str, **extra: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(SignatureError)
    async def handle_signature(_request: Request, exc: SignatureError) -> JSONResponse:
        """Reject requests without a valid, fresh signature."""
        return _error_response(HTTP_401, "Invalid request", info=exc.message)

    @app.exception_handler(DirectoryError)
    async def handle_directory(_request: Request, exc: DirectoryError) -> JSONResponse:
        """Directory errors raised outside run_operation, e.g. no client loaded."""
        logger.warning("Directory unavailable: %s", exc.message)
        return respond(failure_from_error(exc))

    @app.exception_handler(RequestTooLargeError)
    async def handle_too_large(
        _request: Request, exc: RequestTooLargeError
    ) -> JSONResponse:
        """Refuse oversized request bodies."""
        logger.warning("Request too large: %d bytes (limit %d)", exc.size, exc.limit)
        return _error_response(HTTP_413, "Request too large")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
