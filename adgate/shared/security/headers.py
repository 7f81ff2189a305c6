"""
Response headers for the directory gateway.

Every answer, including 401s from the signature check, 413s from the
size limit and 429s from the rate limiter, carries the same hardening
headers. Responses hold directory records such as user attributes and
group memberships, so they are marked no-store and never cached by a
proxy. The gateway only ever serves JSON, so nothing it returns may be
framed or load sub-resources. A header already set by a route handler
is left alone.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-XSS-Protection": "1; mode=block",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Sets SECURE_HEADERS on every outgoing response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers.setdefault(header_name, header_value)
        return response
