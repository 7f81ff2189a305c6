"""
Pydantic schemas documenting the API contract.

Directory payloads are passed through untouched, so only the fixed
shapes (health and errors) are modelled here.
"""

from pydantic import BaseModel, ConfigDict, Field


class StatusResponse(BaseModel):
    """Response schema for the status endpoint."""

    online: bool = True
    uptime: int = Field(..., ge=0, description="Milliseconds since startup")


class AuthErrorResponse(BaseModel):
    """Body of a 401 returned by the signature check."""

    error: str = "Invalid request"
    info: str


class DirectoryErrorResponse(BaseModel):
    """Body of a failed directory operation.

    Extra fields reported by the directory client are kept.
    """

    model_config = ConfigDict(extra="allow")

    error: bool = True
    message: str | None = None


class AcknowledgedResponse(BaseModel):
    """Body of a successful mutating user operation."""

    success: bool = True


ERROR_RESPONSES = {
    401: {"model": AuthErrorResponse},
    503: {"model": DirectoryErrorResponse},
}

ACKNOWLEDGED_RESPONSES = {200: {"model": AcknowledgedResponse}}
