"""
Request body coercion.

Clients of the directory API often send form-style values: urlencoded
bodies, or JSON whose boolean fields arrive as the strings "true" and
"false". Each endpoint declares which fields those are through a
BodySchema. Coercion never raises: anything it cannot handle passes
through.
"""

from dataclasses import dataclass
from typing import Any

from starlette.requests import Request

from adgate.shared.request_body import (
    decode_body,
    media_type,
    parse_json,
    read_limited,
)

BOOLEAN_LITERALS = {"true": True, "false": False}


@dataclass(frozen=True)
class BodySchema:
    """Minimal per-endpoint input schema.

    Attributes:
        boolean_fields: Field names whose "true"/"false" strings become booleans.
    """

    boolean_fields: frozenset[str] = frozenset()


USER_BODY = BodySchema(boolean_fields=frozenset({"passwordExpires", "enabled"}))
PLAIN_BODY = BodySchema()


def coerce_body(body: Any, schema: BodySchema = USER_BODY) -> Any:
    """Normalize a request body for a directory call.

    A raw string is parsed as JSON. A mapping gets its declared boolean
    fields coerced. On any failure the input is returned unchanged.
    """
    if isinstance(body, str):
        return parse_json(body)
    if not isinstance(body, dict):
        return body
    return {
        name: (
            BOOLEAN_LITERALS.get(value, value)
            if name in schema.boolean_fields and isinstance(value, str)
            else value
        )
        for name, value in body.items()
    }


async def read_body(request: Request, max_size: int) -> Any:
    """Read and decode the request body; an empty body becomes {}."""
    raw = await read_limited(request, max_size)
    if not raw:
        return {}
    return decode_body(raw, media_type(request))


def body_field(body: Any, *names: str) -> Any:
    """Return the first truthy field among names, or None."""
    if not isinstance(body, dict):
        return None
    for name in names:
        if body.get(name):
            return body[name]
    return None
