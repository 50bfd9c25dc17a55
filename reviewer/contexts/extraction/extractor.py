"""
PDF Text Extraction Module

Flattens a PDF resume into plain text for the review prompt.
"""

import time
from dataclasses import dataclass
from typing import Optional, Tuple

from reviewer.contexts.extraction.exceptions import ExtractionError
from reviewer.contexts.extraction.logger import (
    _log_error,
    log_extraction_result,
    log_extraction_start,
)
from reviewer.utils.pdf_processing import PDFDocument


@dataclass(frozen=True)
class ExtractedDocument:
    """
    Text of a PDF, one entry per page in document order.

    Attributes:
        pages: Page texts; fragments within a page are space-joined
    """

    pages: Tuple[str, ...]

    @property
    def text(self) -> str:
        """All pages concatenated, each followed by a newline."""
        return "".join(f"{page}\n" for page in self.pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)


def extract_document(pdf_bytes: Optional[bytes]) -> ExtractedDocument:
    """
    Extract the text of every page of a PDF.

    Args:
        pdf_bytes: Raw PDF payload (None or empty means nothing was selected)

    Returns:
        ExtractedDocument with one entry per page

    Raises:
        ExtractionError: If nothing was selected or the PDF library fails for any reason
    """
    if not pdf_bytes:
        _log_error("No PDF selected")
        raise ExtractionError("No PDF payload to extract")

    start_time = time.time()

    try:
        pdf = PDFDocument(pdf_bytes)
        log_extraction_start(len(pdf_bytes), pdf.page_count)
        pages = tuple(" ".join(pdf.get_fragments(page)) for page in pdf.iter_pages())
    except Exception as e:
        # pdfplumber/pdfminer raise many unrelated types for bad input
        _log_error(f"PDF extraction failed: {type(e).__name__}: {e}")
        raise ExtractionError(f"PDF extraction failed: {e}") from e

    document = ExtractedDocument(pages=pages)
    log_extraction_result(document, time.time() - start_time)
    return document


def extract_text(pdf_bytes: Optional[bytes]) -> str:
    """Extract a PDF as a single string. See extract_document()."""
    return extract_document(pdf_bytes).text
