from pydantic import BaseModel, Field


class InfoResponse(BaseModel):
    """Response payload for the /api/info endpoint."""

    service_app_name: str = Field(..., description="Service name.")
    service_version: str = Field(..., description="Service version string.")
    supported_types: list[str] = Field(..., description="MIME types accepted by /extract-text.")
    config: str = Field(..., description="Reserved config field.")
