"""
Raw request body handling shared by the signature check and the routes.

The body is read once per request and capped at the configured size.
It is then decoded the way the signing client encoded it: JSON,
urlencoded form fields, or plain text.
"""

import json
import logging
from typing import Any
from urllib.parse import parse_qsl

from starlette.requests import Request

from adgate.shared.errors import RequestTooLargeError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPES = ("application/json", "+json")
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def media_type(request: Request) -> str:
    """Return the request's content type without parameters."""
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


async def read_limited(request: Request, max_size: int) -> bytes:
    """Return the raw body, refusing anything over max_size bytes.

    A declared Content-Length is checked before the body is read.

    Raises:
        RequestTooLargeError: When the declared or actual size is too big.
    """
    declared = request.headers.get("content-length", "").strip()
    if declared.isdecimal() and int(declared) > max_size:
        raise RequestTooLargeError(int(declared), max_size)
    raw = await request.body()
    if len(raw) > max_size:
        raise RequestTooLargeError(len(raw), max_size)
    return raw


def parse_json(text: str) -> Any:
    """Parse text as JSON, or return it unchanged when it does not parse.

    Documents nested deeper than the interpreter's recursion limit count
    as unparseable.
    """
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        logger.debug("Request body is not valid JSON; keeping it as text")
        return text


def parse_form(text: str) -> dict[str, str]:
    """Decode urlencoded fields. A repeated field keeps its last value."""
    return dict(parse_qsl(text, keep_blank_values=True))


def decode_body(raw: bytes, content_type: str) -> Any:
    """Decode a raw body according to its content type.

    Form bodies become a mapping and JSON bodies are parsed. Anything
    else, including JSON that fails to parse, is returned as text.
    """
    text = raw.decode("utf-8", errors="replace")
    if content_type == FORM_CONTENT_TYPE:
        return parse_form(text)
    if content_type.endswith(JSON_CONTENT_TYPES):
        return parse_json(text)
    return text
