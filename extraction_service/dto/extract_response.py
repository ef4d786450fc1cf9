from typing import Any

from pydantic import BaseModel, Field


class ExtractResponse(BaseModel):
    """Success payload for /extract-text."""

    success: bool = Field(True, description="Always true on success.")
    extractedText: str = Field(..., description="Normalized extracted text.")
    originalFileName: str | None = Field(default=None, description="File name echoed from the request.")
    originalFileType: str = Field(..., description="MIME type echoed from the request.")
    extractedLength: int = Field(..., description="Length of extractedText.")
    extractionMethod: str = Field(..., description="Strategy that produced the text.")
    timestamp: str = Field(..., description="ISO-8601 response timestamp.")


class ErrorResponse(BaseModel):
    """Error payload, extra diagnostic fields depend on the error kind."""

    error: str = Field(..., description="Error summary.")
    details: Any | None = Field(default=None, description="Underlying error detail, when available.")
    message: str | None = Field(default=None, description="Underlying failure message for 500 errors.")
    timestamp: str | None = Field(default=None, description="ISO-8601 timestamp for 413/500 errors.")


class StatusResponse(BaseModel):
    """Response payload for the root status endpoint."""

    status: str = Field(..., description="Service status line.")
    supportedFormats: list[str] = Field(..., description="Supported file extensions.")
    version: str = Field(..., description="Service version string.")
