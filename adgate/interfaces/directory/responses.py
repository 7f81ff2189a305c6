"""
Response normalization.

Every directory route ends by passing its OperationResult through
respond(). normalize() holds the rules and is pure:

    Failure without status  -> 503
    Failure with status     -> that status, hint never in the body
    Failure body            -> gains "error": true
    Success(bool)           -> {"data": <bool>}
    Success(None)           -> {}
"""

from dataclasses import dataclass
from typing import Any

from fastapi.responses import JSONResponse

from adgate.domain.directory.results import STATUS_HINT_KEY, Failure, OperationResult

HTTP_200 = 200
HTTP_503 = 503


@dataclass(frozen=True)
class NormalizedResponse:
    """Status code and JSON body for one operation result."""

    status_code: int
    body: Any


def normalize(result: OperationResult) -> NormalizedResponse:
    """Map an operation result to its HTTP status and body."""
    if isinstance(result, Failure):
        body = {
            key: value for key, value in result.body.items() if key != STATUS_HINT_KEY
        }
        body["error"] = True
        return NormalizedResponse(result.status or HTTP_503, body)

    data = result.data
    if isinstance(data, bool):
        data = {"data": data}
    return NormalizedResponse(HTTP_200, {} if data is None else data)


def respond(result: OperationResult) -> JSONResponse:
    """Render an operation result as a JSON response."""
    normalized = normalize(result)
    return JSONResponse(status_code=normalized.status_code, content=normalized.body)
