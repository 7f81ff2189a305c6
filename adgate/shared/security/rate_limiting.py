"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client limit on every route,
the health check included. Limits are counted in memory per process.
"""

from fastapi import FastAPI
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from adgate.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter keyed by client address."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Kept synchronous: SlowAPIMiddleware calls it without awaiting.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )


def install_rate_limiting(app: FastAPI, settings: Settings) -> None:
    """Attach a fresh limiter and its middleware to the application."""
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
