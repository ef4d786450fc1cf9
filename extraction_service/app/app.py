from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from extraction_service.api import api
from extraction_service.api.extract import extraction_error_handler
from extraction_service.processor.exceptions import ExtractionServiceError, PayloadTooLargeError
from extraction_service.processor.processor import Processor
from extraction_service.settings import settings
from extraction_service.utils.utils import setup_logging

log = setup_logging(component_name="app", log_level=settings.LOG_LEVEL)


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects requests whose declared Content-Length exceeds the cap.

    Bodies sent without a length header are checked again by the endpoint
    once they have been read.
    """

    def __init__(self, app: ASGIApp, max_body_size: int) -> None:
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        content_length = request.headers.get("content-length", "")
        if content_length.isdigit() and int(content_length) > self.max_body_size:
            log.error("Rejected request to %s, content-length %s exceeds %s bytes",
                      request.url.path, content_length, self.max_body_size)
            error = PayloadTooLargeError(self.max_body_size)
            return ORJSONResponse(status_code=error.status_code, content=error.to_payload())
        return await call_next(request)


def create_app(processor: Processor | None = None) -> FastAPI:
    """
        :description: Creates FastAPI application with API router, CORS and request size limits
        :param processor: Processor instance to serve requests with, a default one is created if omitted
        :return: FastAPI application instance
    """

    app = FastAPI(title="Extraction Service",
                  description="Text extraction service for PDF, Word and plain text documents",
                  version=settings.EXTRACTION_SERVICE_VERSION,
                  default_response_class=ORJSONResponse,
                  debug=settings.DEBUG_MODE)
    app.include_router(api)
    app.add_exception_handler(ExtractionServiceError, extraction_error_handler)

    # added first so CORS wraps it and 413 responses still carry CORS headers
    app.add_middleware(RequestSizeLimitMiddleware, max_body_size=settings.MAX_REQUEST_BODY_SIZE)
    app.add_middleware(CORSMiddleware,
                       allow_origins=settings.CORS_ALLOW_ORIGINS,
                       allow_methods=["*"],
                       allow_headers=["*"])

    app.state.processor = processor if processor is not None else Processor()

    log.info("Extraction service v%s created, max body size: %s bytes",
             settings.EXTRACTION_SERVICE_VERSION, settings.MAX_REQUEST_BODY_SIZE)

    return app
