"""
FastAPI router for cross-entity queries: other objects, everything,
and free-form search filters.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from adgate.application.directory.operations import run_operation
from adgate.domain.directory.ports import DirectoryClient
from adgate.interfaces.directory.dependencies import get_directory, get_query_options
from adgate.interfaces.directory.responses import respond
from adgate.interfaces.directory.schemas import ERROR_RESPONSES
from adgate.shared.security.signature import require_signature

router = APIRouter(
    tags=["search"],
    dependencies=[Depends(require_signature)],
    responses=ERROR_RESPONSES,
)


@router.get("/other", summary="List objects that are not users, groups or OUs")
async def list_other(
    options: dict = Depends(get_query_options),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.other().get(options)))


@router.get("/all", summary="List every directory object")
async def list_all(
    options: dict = Depends(get_query_options),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.all().get(options)))


@router.get("/find/{search}", summary="Run a search filter")
async def find(
    search: str,
    options: dict = Depends(get_query_options),
    directory: DirectoryClient = Depends(get_directory),
) -> JSONResponse:
    return respond(await run_operation(directory.find(search, options)))
