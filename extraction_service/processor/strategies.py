from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from io import BytesIO

import pypdfium2 as pdfium
from docx import Document
from docx.table import Table

from extraction_service.processor.exceptions import ExtractionError
from extraction_service.settings import settings
from extraction_service.utils.utils import has_zip_signature, setup_logging

log = setup_logging(component_name="strategies", log_level=settings.LOG_LEVEL)

MIME_PDF = "application/pdf"
MIME_MSWORD = "application/msword"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MIME_TEXT = "text/plain"


def _matches(exact: tuple[str, ...], fragments: tuple[str, ...]) -> Callable[[str], bool]:
    def predicate(file_type: str) -> bool:
        return file_type in exact or any(fragment in file_type for fragment in fragments)
    return predicate


@dataclass(frozen=True)
class ExtractionStrategy:
    """A format-specific way of turning a byte buffer into text."""

    name: str
    method: str
    failure_prefix: str
    matches: Callable[[str], bool]
    extract_text: Callable[[bytes], str]

    def extract(self, stream: bytes) -> str:
        """Run the underlying decoder, wrapping its errors as ExtractionError."""
        try:
            return self.extract_text(stream)
        except ExtractionError:
            raise
        except Exception as exception:
            log.error("%s extraction error: %s", self.name, exception)
            raise ExtractionError(f"{self.failure_prefix}: {exception}") from exception


def extract_pdf_text(stream: bytes) -> str:
    pages: list[str] = []

    pdf = pdfium.PdfDocument(stream)
    try:
        log.info("PDF loaded, pages: " + str(len(pdf)))
        for page in pdf:
            textpage = page.get_textpage()
            pages.append(textpage.get_text_bounded())
            textpage.close()
            page.close()
    finally:
        pdf.close()

    # pages separated by a blank line
    return "\n\n".join(pages)


def extract_word_text(stream: bytes) -> str:
    """Raw text of a Word document: paragraphs and table rows in body order.

    Args:
        stream (bytes): document buffer.

    Raises:
        ExtractionError: the buffer is empty or too small to be a document.

    Returns:
        str: newline separated text blocks.
    """

    if len(stream) == 0:
        raise ExtractionError("File buffer is empty - possible base64 decoding issue")

    if len(stream) < settings.MIN_WORD_BUFFER_SIZE:
        raise ExtractionError(f"File buffer too small ({len(stream)} bytes) - possible corruption")

    if not has_zip_signature(stream):
        # legacy binary .doc has no ZIP header, try anyway
        log.warning("File does not have ZIP signature. Expected: %s Got: %s",
                    "504b0304", stream[:4].hex())

    document = Document(BytesIO(stream))

    blocks: list[str] = []
    for block in document.iter_inner_content():
        if isinstance(block, Table):
            for row in block.rows:
                blocks.append("\t".join(cell.text for cell in row.cells))
        else:
            blocks.append(block.text)

    return "\n".join(blocks)


def extract_plain_text(stream: bytes) -> str:
    return stream.decode("utf-8")


# evaluated in order, first match wins
STRATEGIES: list[ExtractionStrategy] = [
    ExtractionStrategy(
        name="pdf",
        method="PDF parsing",
        failure_prefix="PDF extraction failed",
        matches=_matches((MIME_PDF,), ("pdf",)),
        extract_text=extract_pdf_text,
    ),
    ExtractionStrategy(
        name="word",
        method="Word document parsing",
        failure_prefix="Word document extraction failed",
        matches=_matches((MIME_MSWORD, MIME_DOCX), ("wordprocessingml", "officedocument", "msword", "word")),
        extract_text=extract_word_text,
    ),
    ExtractionStrategy(
        name="text",
        method="Text file reading",
        failure_prefix="Text file reading failed",
        matches=_matches((MIME_TEXT,), ("text",)),
        extract_text=extract_plain_text,
    ),
]


def select_strategy(file_type: str, strategies: list[ExtractionStrategy] | None = None) -> ExtractionStrategy | None:
    """Return the first strategy whose predicate accepts the declared type, or None."""
    for strategy in strategies if strategies is not None else STRATEGIES:
        if strategy.matches(file_type):
            return strategy
    return None
