"""
Dependency injection for the directory routes.

Provides FastAPI dependency functions that hand each route the loaded
directory client, the translated query options and the coerced body.
"""

from typing import Any, Awaitable, Callable

from fastapi import Request

from adgate.domain.directory.errors import DirectoryNotConfiguredError
from adgate.domain.directory.ports import DirectoryClient
from adgate.interfaces.directory.body import BodySchema, coerce_body, read_body
from adgate.interfaces.directory.query import parse_query


def get_directory(request: Request) -> DirectoryClient:
    """Return the directory client loaded at startup."""
    directory = request.app.state.directory
    if directory is None:
        raise DirectoryNotConfiguredError()
    return directory


def get_query_options(request: Request) -> dict[str, Any]:
    """Translate the query string into directory options."""
    return parse_query(request.query_params)


def request_body(schema: BodySchema) -> Callable[[Request], Awaitable[Any]]:
    """Build a dependency returning the body coerced against schema."""

    async def dependency(request: Request) -> Any:
        max_size = request.app.state.settings.max_request_size_bytes
        return coerce_body(await read_body(request, max_size), schema)

    return dependency
