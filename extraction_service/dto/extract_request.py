from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExtractRequest(BaseModel):
    """JSON payloads sent to /extract-text.

    Fields are untyped at the schema level: the processor reports missing
    fields before anything else, and fileName is informational only.
    """

    model_config = ConfigDict(extra="ignore")

    fileData: Any = Field(default=None, description="Base64-encoded document bytes.")
    fileType: Any = Field(default=None, description="Declared MIME type of the document.")
    fileName: Any = Field(default=None, description="Original file name, informational only.")
