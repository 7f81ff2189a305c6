"""
Health check router.

Provides the unauthenticated status endpoint for liveness probes.
It is never behind the signature check.
"""

import time

from fastapi import APIRouter, Request

from adgate.interfaces.directory.schemas import StatusResponse

router = APIRouter(tags=["health"])


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="Health check",
    description="Reports that the gateway is online and how long it has been up.",
)
def status(request: Request) -> StatusResponse:
    """Return liveness and uptime in milliseconds."""
    uptime = int((time.monotonic() - request.app.state.started_at) * 1000)
    return StatusResponse(online=True, uptime=max(uptime, 0))
