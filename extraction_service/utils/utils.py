"""Utility helpers for the extraction service.

This module centralizes shared behaviors across the API and processor layers,
including response shaping, base64 decoding, file sniffing and logging setup.
"""

import base64
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any

import filetype

from extraction_service.settings import settings

SUPPORTED_FORMATS: list[str] = ["pdf", "doc", "docx", "txt"]

SUPPORTED_TYPES: list[str] = [
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain",
]

# local file header of a ZIP archive, every .docx starts with it
ZIP_SIGNATURE = b"\x50\x4b\x03\x04"

_BASE64_IGNORED = re.compile(r"\s+")


def get_app_info() -> dict:
    """Return general information about the application.

    Used by the `/api/info` endpoint.

    Returns:
        dict: Application information (name, version, supported types, config placeholder).
    """
    return {"service_app_name": "extraction-service",
            "service_version": settings.EXTRACTION_SERVICE_VERSION,
            "supported_types": list(SUPPORTED_TYPES),
            "config": ""}


def get_service_status() -> dict:
    """Return the payload of the root status endpoint."""
    return {"status": "File Processing Service Online",
            "supportedFormats": list(SUPPORTED_FORMATS),
            "version": settings.EXTRACTION_SERVICE_VERSION}


def utc_timestamp() -> str:
    """ISO-8601 timestamp in UTC with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_response(
    text: str,
    extraction_method: str,
    file_name: str | None = None,
    file_type: str | None = None,
    timestamp: str | None = None,
) -> dict[str, Any]:
    """Build the success payload of `/extract-text`.

    Args:
        text: Normalized extracted text.
        extraction_method: Label of the strategy that produced the text.
        file_name: File name echoed from the request.
        file_type: Declared MIME type echoed from the request.
        timestamp: Response timestamp, generated if not given.

    Returns:
        dict[str, Any]: Response structure for the API.
    """

    return {
        "success": True,
        "extractedText": text,
        "originalFileName": file_name,
        "originalFileType": file_type,
        "extractedLength": len(text),
        "extractionMethod": extraction_method,
        "timestamp": timestamp or utc_timestamp(),
    }


def decode_base64(data: str) -> bytes:
    """Decode a base64 string into bytes.

    Whitespace (line-wrapped encoders) is ignored and missing padding is
    tolerated, anything outside the base64 alphabet is rejected.

    Args:
        data: base64 text.

    Raises:
        ValueError: if the data is not valid base64.

    Returns:
        bytes: decoded buffer.
    """
    compact = _BASE64_IGNORED.sub("", data)
    compact += "=" * (-len(compact) % 4)
    return base64.b64decode(compact, validate=True)


def has_zip_signature(stream: bytes) -> bool:
    """Return True if the stream starts with a ZIP local file header."""
    return stream[:4] == ZIP_SIGNATURE


def detect_file_type(stream: bytes) -> object | None:
    """Best-effort file type detection using the `filetype` library.

    Args:
        stream: Raw bytes to inspect.

    Returns:
        object | None: Detected type descriptor or None if unknown.
    """
    file_type = None
    try:
        file_type = filetype.guess(stream)
    except Exception:
        logging.error("Could not determine file Type")
    return file_type


def resolve_content_type(file_type: object | None) -> str:
    if file_type is not None:
        return str(file_type.mime)  # type: ignore
    return "unknown"


def setup_logging(component_name: str = "config_logger", log_level: int = 20) -> logging.Logger:
    """Configure a logger that writes to stdout with a consistent format.

    Args:
        component_name: Logger name to configure.
        log_level: Logging level to set on the logger and handler.

    Returns:
        logging.Logger: Configured logger instance.
    """
    root_logger = logging.getLogger(component_name)
    log_format = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'
    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.setFormatter(logging.Formatter(fmt=log_format))
    log_handler.setLevel(level=log_level)
    root_logger.setLevel(level=log_level)
    root_logger.propagate = False

    # only add the handler if a previous one does not exists
    handler_exists = False
    for h in root_logger.handlers:
        if isinstance(h, logging.StreamHandler) and h.level is log_handler.level:
            handler_exists = True
            break

    if not handler_exists:
        root_logger.addHandler(log_handler)

    return root_logger
