"""
PDF processing utilities for in-memory text extraction.

Main class:
    PDFDocument: Parsed PDF exposing ordered text fragments per page.

Helper functions:
    page_count: Quick page count without full extraction.
    page_fragments: Ordered text fragments of a single pdfplumber page.
"""

from io import BytesIO
from typing import Dict, Iterator, List, Optional

import pdfplumber
from PyPDF2 import PdfReader


def page_count(pdf_bytes: bytes) -> Optional[int]:
    """Get page count from PDF bytes, or None if unreadable."""
    try:
        reader = PdfReader(BytesIO(pdf_bytes))
        return len(reader.pages)
    except Exception:
        return None


def page_fragments(page) -> List[str]:
    """
    Text fragments of a page in reading order.

    Fragments are pdfplumber words: characters grouped by line (top to bottom),
    then by x-position, split at whitespace.
    """
    return [word["text"] for word in page.extract_words()]


class PDFDocument:
    """
    Parsed PDF held entirely in memory.

    Page data is lazily loaded and cached on first access. Pages are
    1-indexed, matching how viewers number them.

    Args:
        pdf_bytes: Raw PDF payload

    Example:
        >>> pdf = PDFDocument(uploaded.read())
        >>> for page in pdf.iter_pages():
        ...     print(" ".join(pdf.get_fragments(page)))
    """

    def __init__(self, pdf_bytes: bytes):
        if not pdf_bytes:
            raise ValueError("PDF payload is empty")

        self.pdf_bytes = pdf_bytes
        self._pages_cache: Optional[Dict[int, List[str]]] = None
        self._page_count: Optional[int] = None

    @property
    def page_count(self) -> int:
        if self._page_count is None:
            self._page_count = page_count(self.pdf_bytes) or 0
        return self._page_count

    def _extract_pages(self) -> Dict[int, List[str]]:
        """Extract fragments from every page. Collaborator errors propagate."""
        pages_data: Dict[int, List[str]] = {}

        with pdfplumber.open(BytesIO(self.pdf_bytes)) as pdf:
            for page_num, page in enumerate(pdf.pages, start=1):
                pages_data[page_num] = page_fragments(page)

        return pages_data

    def _ensure_loaded(self) -> None:
        """Lazily load page data if not already cached."""
        if self._pages_cache is None:
            self._pages_cache = self._extract_pages()

    def get_fragments(self, page: int) -> List[str]:
        """
        Get text fragments for a specific page.

        Args:
            page: Page number (1-indexed)

        Returns:
            Fragments in reading order. Empty list if the page doesn't exist.
        """
        self._ensure_loaded()
        return self._pages_cache.get(page, [])

    def iter_pages(self) -> Iterator[int]:
        """Iterate over page numbers (1-indexed) in ascending order."""
        self._ensure_loaded()
        return iter(sorted(self._pages_cache.keys()))
