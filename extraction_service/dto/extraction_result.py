from pydantic import BaseModel, ConfigDict, Field


class ExtractionResult(BaseModel):
    """Outcome of a successful extraction, lives for one request."""

    model_config = ConfigDict(frozen=True)

    extracted_text: str = Field(..., min_length=1)
    extraction_method: str
    original_file_name: str | None = None
    original_file_type: str
    timestamp: str

    @property
    def extracted_length(self) -> int:
        return len(self.extracted_text)
