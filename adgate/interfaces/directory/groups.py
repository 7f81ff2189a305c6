"""
FastAPI router for directory groups and their membership.
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from adgate.application.directory.operations import acknowledge, run_operation
from adgate.domain.directory.ports import DirectoryClient
from adgate.interfaces.directory.body import PLAIN_BODY
from adgate.interfaces.directory.dependencies import (
    get_directory,
    get_query_options,
    request_body,
)
from adgate.interfaces.directory.responses import respond
from adgate.interfaces.directory.schemas import ACKNOWLEDGED_RESPONSES, ERROR_RESPONSES
from adgate.shared.security.signature import require_signature

router = APIRouter(
    prefix="/group",
    tags=["groups"],
    dependencies=[Depends(require_signature)],
    responses=ERROR_RESPONSES,
)


@router.get("", summary="List groups")
async def list_groups(
    options: dict = Depends(get_query_options),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.group().get(options)))


@router.post("", summary="Create a group")
async def add_group(
    body: Any = Depends(request_body(PLAIN_BODY)),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.group().add(body)))


@router.get("/{group}", summary="Get a group")
async def get_group(
    group: str,
    options: dict = Depends(get_query_options),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.group(group).get(options)))


@router.get("/{group}/exists", summary="Check whether a group exists")
async def group_exists(
    group: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(await run_operation(directory.group(group).exists()))


@router.post(
    "/{group}/users/{user}",
    summary="Add a user to a group",
    responses=ACKNOWLEDGED_RESPONSES,
)
async def add_user_to_group(
    group: str, user: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    result = await run_operation(directory.user(user).add_to_group(group))
    return respond(acknowledge(result))


@router.delete(
    "/{group}/users/{user}",
    summary="Remove a user from a group",
    responses=ACKNOWLEDGED_RESPONSES,
)
async def remove_user_from_group(
    group: str, user: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    result = await run_operation(directory.user(user).remove_from_group(group))
    return respond(acknowledge(result))


@router.delete("/{group}", summary="Delete a group")
async def remove_group(
    group: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(await run_operation(directory.group(group).remove()))
