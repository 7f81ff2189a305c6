"""
Query string translation.

Turns the query parameters of list and get routes into the options
mapping handed to the directory client. Unknown parameters are ignored
and unset ones omitted.
"""

from typing import Any, Mapping

PASSTHROUGH_KEYS = ("q", "filter", "sort", "order", "start", "end")
INTEGER_KEYS = ("limit", "page")
FIELD_KEYS = ("fields", "attributes")


def _split_fields(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def parse_query(params: Mapping[str, str]) -> dict[str, Any]:
    """Build directory options from query parameters.

    Args:
        params: The request query parameters.

    Returns:
        Options such as {"q": "smith", "fields": ["cn", "mail"], "limit": 10}.
    """
    options: dict[str, Any] = {}

    for key in PASSTHROUGH_KEYS:
        value = params.get(key)
        if value:
            options[key] = value

    for key in INTEGER_KEYS:
        value = params.get(key)
        if value and value.strip().isdecimal():
            options[key] = int(value)

    for key in FIELD_KEYS:
        value = params.get(key)
        if value:
            fields = _split_fields(value)
            if fields:
                options["fields"] = fields
            break

    return options
