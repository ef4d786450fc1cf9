from __future__ import annotations

import time

from extraction_service.dto.extraction_context import ExtractionContext, ExtractionStage
from extraction_service.dto.extraction_result import ExtractionResult
from extraction_service.processor.exceptions import (
    ContentTooShortError,
    ExtractionServiceError,
    UnsupportedTypeError,
    ValidationError,
)
from extraction_service.processor.normalizer import normalize_text
from extraction_service.processor.strategies import STRATEGIES, ExtractionStrategy, select_strategy
from extraction_service.settings import settings
from extraction_service.utils.utils import (
    SUPPORTED_TYPES,
    decode_base64,
    detect_file_type,
    resolve_content_type,
    setup_logging,
    utc_timestamp,
)


class Processor:

    def __init__(self,
                 min_text_length: int | None = None,
                 preview_length: int | None = None,
                 strategies: list[ExtractionStrategy] | None = None):
        self.log = setup_logging(component_name="processor", log_level=settings.LOG_LEVEL)
        self.log.debug("log level set to : " + str(settings.LOG_LEVEL))
        self.min_text_length = settings.MIN_TEXT_LENGTH if min_text_length is None else min_text_length
        self.preview_length = settings.PREVIEW_LENGTH if preview_length is None else preview_length
        self.strategies = STRATEGIES if strategies is None else strategies

    @property
    def supported_types(self) -> list[str]:
        return list(SUPPORTED_TYPES)

    def _validate_fields(self, context: ExtractionContext) -> None:
        if not context.file_data or not context.file_type:
            self.log.error("Missing required fields: fileData=%s fileType=%s",
                           bool(context.file_data), bool(context.file_type))
            raise ValidationError(
                "Missing required fields: fileData and fileType",
                received={
                    "fileData": bool(context.file_data),
                    "fileType": bool(context.file_type),
                    "fileName": bool(context.file_name),
                },
            )
        context.advance(ExtractionStage.VALIDATED)

    def _decode(self, context: ExtractionContext) -> None:
        try:
            if not isinstance(context.file_data, str):
                raise ValueError("fileData must be a base64 string, got " + type(context.file_data).__name__)
            context.stream = decode_base64(context.file_data)
        except ValueError as exception:
            self.log.error("Base64 conversion failed: " + str(exception))
            raise ValidationError("Invalid base64 file data", details=str(exception)) from exception

        context.metadata["size"] = len(context.stream)
        context.metadata["content-type"] = resolve_content_type(detect_file_type(context.stream))
        self.log.info("Buffer created, size: " + str(len(context.stream)) + " bytes | detected content-type: "
                      + context.metadata["content-type"])

    def _select_strategy(self, file_type: object) -> ExtractionStrategy:
        strategy = select_strategy(file_type, self.strategies) if isinstance(file_type, str) else None
        if strategy is None:
            self.log.error("Unsupported file type: " + str(file_type))
            raise UnsupportedTypeError(str(file_type), self.supported_types)
        return strategy

    def _check_length(self, context: ExtractionContext) -> None:
        if not context.text or len(context.text) < self.min_text_length:
            self.log.error("Extracted text too short: " + str(len(context.text)))
            raise ContentTooShortError(
                extracted_length=len(context.text),
                min_required=self.min_text_length,
                preview=context.text[:self.preview_length],
            )

    def extract(self, file_data: str | None, file_type: str | None, file_name: object = None) -> ExtractionResult:
        """ Runs one document through the pipeline:
        received -> validated -> decoded -> normalized -> accepted | rejected

        Args:
            file_data (str | None): _description_ . base64-encoded document
            file_type (str | None): _description_ . declared MIME type, matched loosely
            file_name (object, optional): _description_ . echoed back as a string, never interpreted

        Raises:
            ValidationError: missing fields or invalid base64
            UnsupportedTypeError: no strategy accepts the declared type
            ExtractionError: the underlying decoder failed
            ContentTooShortError: cleaned text below the minimum length

        Returns:
            ExtractionResult: _description_
        """

        context = ExtractionContext(file_data=file_data, file_type=file_type,
                                    file_name=None if file_name is None else str(file_name))
        start_time = time.time()

        self.log.info("Processing file name: " + str(file_name) + " | file type: " + str(file_type))

        try:
            self._validate_fields(context)
            self._decode(context)

            strategy = self._select_strategy(context.file_type)
            self.log.info("Processing as " + strategy.name + "...")

            context.raw_text = strategy.extract(context.stream)
            context.extraction_method = strategy.method
            context.advance(ExtractionStage.DECODED)
            self.log.info(strategy.name + " processed successfully, text length: " + str(len(context.raw_text)))

            context.text = normalize_text(context.raw_text)
            context.advance(ExtractionStage.NORMALIZED)
            self.log.info("Text cleaned, final length: " + str(len(context.text)))

            self._check_length(context)
            context.advance(ExtractionStage.ACCEPTED)
        except ExtractionServiceError:
            context.advance(ExtractionStage.REJECTED)
            raise
        finally:
            elapsed_time = float(round(float(time.time() - start_time), 4))
            context.metadata["elapsed_time"] = elapsed_time
            self.log.info("Finished processing file: " + str(file_name) + " | stage: " + context.stage.value
                          + " | Elapsed time: " + str(elapsed_time) + " seconds")

        return ExtractionResult(
            extracted_text=context.text,
            extraction_method=context.extraction_method,
            original_file_name=context.file_name,
            original_file_type=str(context.file_type),
            timestamp=utc_timestamp(),
        )
