"""Error taxonomy for the extraction pipeline.

Each error knows the HTTP status it maps to and how to render itself as a
JSON payload, so the API layer only has to hand it to the response builder.
"""

from typing import Any

from extraction_service.utils.utils import utc_timestamp


class ExtractionServiceError(Exception):
    """Base class for every error the service reports to the caller."""

    status_code: int = 500

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, **self.details}


class ValidationError(ExtractionServiceError):
    """Malformed or missing request input."""

    status_code = 400


class UnsupportedTypeError(ExtractionServiceError):
    """The declared file type matches no extraction strategy."""

    status_code = 400

    def __init__(self, file_type: str, supported_types: list[str]) -> None:
        super().__init__(
            f"Unsupported file type: {file_type}",
            supportedTypes=list(supported_types),
            receivedType=file_type,
            hint="This service supports PDF, Word documents, and text files",
        )
        self.file_type = file_type
        self.supported_types = list(supported_types)


class ContentTooShortError(ExtractionServiceError):
    """The cleaned text is empty or below the minimum length."""

    status_code = 400

    def __init__(self, extracted_length: int, min_required: int, preview: str = "") -> None:
        super().__init__(
            "Extracted text is too short or empty",
            extractedLength=extracted_length,
            minRequired=min_required,
            preview=preview,
        )
        self.extracted_length = extracted_length
        self.min_required = min_required


class ExtractionError(ExtractionServiceError):
    """An underlying decoder failed on the supplied document."""

    status_code = 500

    def to_payload(self) -> dict[str, Any]:
        return {"error": "File processing failed", "message": self.message, "timestamp": utc_timestamp()}


class PayloadTooLargeError(ExtractionServiceError):
    """The request body exceeds the configured size cap."""

    status_code = 413

    def __init__(self, limit: int) -> None:
        super().__init__("Request body too large", limit=limit)
        self.limit = limit

    def to_payload(self) -> dict[str, Any]:
        return {**super().to_payload(), "timestamp": utc_timestamp()}
