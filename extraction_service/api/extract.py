import traceback
from typing import Any

import orjson
from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.concurrency import run_in_threadpool

from extraction_service.dto.extract_request import ExtractRequest
from extraction_service.dto.extract_response import ErrorResponse, ExtractResponse
from extraction_service.processor.exceptions import (
    ExtractionError,
    ExtractionServiceError,
    PayloadTooLargeError,
    ValidationError,
)
from extraction_service.processor.processor import Processor
from extraction_service.settings import settings
from extraction_service.utils.utils import build_response, setup_logging

log = setup_logging(component_name="api", log_level=settings.LOG_LEVEL)

extract_api = APIRouter()


def get_processor(request: Request) -> Processor:
    processor = getattr(request.app.state, "processor", None)
    if processor is None:
        processor = Processor()
        request.app.state.processor = processor
    return processor


def parse_extract_request(body: bytes) -> ExtractRequest:
    """Parse the raw request body into an ExtractRequest.

    An empty body or a JSON value that is not an object carries no fields,
    the processor then reports them as missing.
    """
    payload: Any = {}
    if body.strip():
        try:
            payload = orjson.loads(body)
        except orjson.JSONDecodeError as exception:
            raise ValidationError("Invalid JSON body", details=str(exception)) from exception

    if not isinstance(payload, dict):
        payload = {}

    return ExtractRequest.model_validate(payload)


async def extraction_error_handler(request: Request, exception: Exception) -> ORJSONResponse:
    if not isinstance(exception, ExtractionServiceError):
        raise exception
    return ORJSONResponse(status_code=exception.status_code, content=exception.to_payload())


@extract_api.post("/extract-text",
                  response_model=ExtractResponse,
                  response_class=ORJSONResponse,
                  responses={400: {"model": ErrorResponse},
                             413: {"model": ErrorResponse},
                             500: {"model": ErrorResponse}})
async def extract_text(request: Request) -> ORJSONResponse:
    """
        :description: Extracts normalized text from a base64-encoded PDF, Word or plain text document
        :param request: JSON body {fileData, fileType, fileName?}
        :return: extracted text and extraction details
    """

    log.info("=== NEW REQUEST ===")

    body = await request.body()
    if len(body) > settings.MAX_REQUEST_BODY_SIZE:
        log.error("Request body too large: " + str(len(body)) + " bytes")
        raise PayloadTooLargeError(settings.MAX_REQUEST_BODY_SIZE)

    extract_request = parse_extract_request(body)
    file_data = extract_request.fileData
    log.info("Received data: fileName=%s fileType=%s fileData length=%s",
             extract_request.fileName, extract_request.fileType,
             len(file_data) if isinstance(file_data, str) else type(file_data).__name__)

    processor = get_processor(request)

    try:
        result = await run_in_threadpool(processor.extract,
                                         extract_request.fileData,
                                         extract_request.fileType,
                                         extract_request.fileName)
    except ExtractionServiceError:
        raise
    except Exception as exception:
        log.error("FATAL ERROR: " + str(exception) + "\n" + traceback.format_exc())
        raise ExtractionError(str(exception)) from exception

    log.info("SUCCESS: File processed successfully")

    return ORJSONResponse(content=build_response(text=result.extracted_text,
                                                 extraction_method=result.extraction_method,
                                                 file_name=result.original_file_name,
                                                 file_type=result.original_file_type,
                                                 timestamp=result.timestamp))
