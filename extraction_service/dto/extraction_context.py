from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ExtractionStage(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    DECODED = "decoded"
    NORMALIZED = "normalized"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ExtractionContext(BaseModel):
    """Holds per-request state while a document moves through the pipeline.

    Internal to the processor, never serialized to the caller.
    """

    file_data: Any = None
    """base64 payload as received."""

    file_type: Any = None
    """Declared MIME type as received."""

    file_name: str | None = None
    """Informational file name as received."""

    stage: ExtractionStage = ExtractionStage.RECEIVED
    """Last stage the request reached."""

    stream: bytes = b""
    """Decoded document bytes."""

    raw_text: str = ""
    """Text returned by the extraction strategy."""

    text: str = ""
    """Normalized text."""

    extraction_method: str = ""
    """Label of the strategy that produced the text."""

    metadata: dict[str, Any] = Field(default_factory=dict)
    """Diagnostics such as sniffed content-type, sizes and timing."""

    def advance(self, stage: ExtractionStage) -> None:
        self.stage = stage
