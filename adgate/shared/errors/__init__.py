"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that signature, directory and
request errors are consistently translated into API responses.
The handlers live in adgate.shared.errors.handlers.
"""


class RequestTooLargeError(Exception):
    """Raised when a request body exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Request body of {size} bytes exceeds {limit} bytes")
        self.size = size
        self.limit = limit
