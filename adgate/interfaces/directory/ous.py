"""
FastAPI router for organizational units.
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from adgate.application.directory.operations import run_operation
from adgate.domain.directory.ports import DirectoryClient
from adgate.interfaces.directory.body import PLAIN_BODY
from adgate.interfaces.directory.dependencies import (
    get_directory,
    get_query_options,
    request_body,
)
from adgate.interfaces.directory.responses import respond
from adgate.interfaces.directory.schemas import ERROR_RESPONSES
from adgate.shared.security.signature import require_signature

router = APIRouter(
    prefix="/ou",
    tags=["organizational units"],
    dependencies=[Depends(require_signature)],
    responses=ERROR_RESPONSES,
)


@router.get("", summary="List organizational units")
async def list_ous(
    options: dict = Depends(get_query_options),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.ou().get(options)))


@router.post("", summary="Create an organizational unit")
async def add_ou(
    body: Any = Depends(request_body(PLAIN_BODY)),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.ou().add(body)))


@router.get("/{ou}", summary="Get an organizational unit")
async def get_ou(
    ou: str,
    options: dict = Depends(get_query_options),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.ou(ou).get(options)))


@router.get("/{ou}/exists", summary="Check whether an organizational unit exists")
async def ou_exists(
    ou: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(await run_operation(directory.ou(ou).exists()))


@router.delete("/{ou}", summary="Delete an organizational unit")
async def remove_ou(
    ou: str, directory: DirectoryClient = Depends(get_directory)
) -> JSONResponse:
    return respond(await run_operation(directory.ou(ou).remove()))
