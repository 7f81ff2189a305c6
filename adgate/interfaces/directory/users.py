"""
FastAPI router for directory user accounts.

Each route makes exactly one directory call and hands the outcome to
respond(). No business logic here.
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from adgate.application.directory.operations import acknowledge, run_operation
from adgate.domain.directory.ports import DirectoryClient
from adgate.interfaces.directory.body import USER_BODY, body_field
from adgate.interfaces.directory.dependencies import (
    get_directory,
    get_query_options,
    request_body,
)
from adgate.interfaces.directory.responses import respond
from adgate.interfaces.directory.schemas import ACKNOWLEDGED_RESPONSES, ERROR_RESPONSES
from adgate.shared.security.signature import require_signature

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(require_signature)],
    responses=ERROR_RESPONSES,
)

user_body = request_body(USER_BODY)


@router.get("", summary="List users")
async def list_users(
    options: dict = Depends(get_query_options),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.user().get(options)))


@router.post("", summary="Create a user")
async def add_user(
    body: Any = Depends(user_body),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.user().add(body)))


@router.get("/{user}", summary="Get a user")
async def get_user(
    user: str,
    options: dict = Depends(get_query_options),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.user(user).get(options)))


@router.get("/{user}/exists", summary="Check whether a user exists")
async def user_exists(
    user: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(await run_operation(directory.user(user).exists()))


@router.get("/{user}/member-of/{group}", summary="Check group membership")
async def user_is_member_of(
    user: str, group: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(await run_operation(directory.user(user).is_member_of(group)))


@router.post(
    "/{user}/authenticate",
    summary="Verify a user's password",
    description='Reads the password from "pass" or "password".',
)
async def authenticate_user(
    user: str,
    body: Any = Depends(user_body),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    password = body_field(body, "pass", "password")
    return respond(await run_operation(directory.user(user).authenticate(password)))


@router.put(
    "/{user}",
    summary="Update user attributes",
    responses=ACKNOWLEDGED_RESPONSES,
)
async def update_user(
    user: str,
    body: Any = Depends(user_body),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    result = await run_operation(directory.user(user).update(body))
    return respond(acknowledge(result, mark_failure=True))


@router.put(
    "/{user}/password",
    summary="Set a user's password",
    responses=ACKNOWLEDGED_RESPONSES,
)
async def set_user_password(
    user: str,
    body: Any = Depends(user_body),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    password = body_field(body, "pass", "password")
    result = await run_operation(directory.user(user).set_password(password))
    return respond(acknowledge(result, mark_failure=True))


@router.put(
    "/{user}/password-never-expires",
    summary="Stop password expiry",
    responses=ACKNOWLEDGED_RESPONSES,
)
async def set_password_never_expires(
    user: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    result = await run_operation(directory.user(user).password_never_expires())
    return respond(acknowledge(result, mark_failure=True))


@router.put(
    "/{user}/password-expires",
    summary="Resume password expiry",
    responses=ACKNOWLEDGED_RESPONSES,
)
async def set_password_expires(
    user: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    result = await run_operation(directory.user(user).password_expires())
    return respond(acknowledge(result))


@router.put(
    "/{user}/enable",
    summary="Enable a user account",
    responses=ACKNOWLEDGED_RESPONSES,
)
async def enable_user(
    user: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(acknowledge(await run_operation(directory.user(user).enable())))


@router.put(
    "/{user}/disable",
    summary="Disable a user account",
    responses=ACKNOWLEDGED_RESPONSES,
)
async def disable_user(
    user: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(acknowledge(await run_operation(directory.user(user).disable())))


@router.put("/{user}/move", summary="Move a user to another container")
async def move_user(
    user: str,
    body: Any = Depends(user_body),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    location = body_field(body, "location")
    return respond(await run_operation(directory.user(user).move(location)))


@router.put(
    "/{user}/unlock",
    summary="Unlock a locked-out account",
    responses=ACKNOWLEDGED_RESPONSES,
)
async def unlock_user(
    user: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(acknowledge(await run_operation(directory.unlock_user(user))))


@router.delete("/{user}", summary="Delete a user")
async def remove_user(
    user: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(await run_operation(directory.user(user).remove()))
