"""
Unit tests for PDF text extraction.

The PDF library is replaced with an in-memory double so these tests only
exercise page ordering, joining, and error mapping.
"""

from unittest.mock import patch

import pytest

from reviewer.contexts.extraction import ExtractionError, extract_document, extract_text

PDF_DOCUMENT = "reviewer.contexts.extraction.extractor.PDFDocument"


class FakePDF:
    """Stands in for PDFDocument: fragments per 1-indexed page."""

    def __init__(self, pages):
        self._pages = pages
        self.page_count = len(pages)

    def iter_pages(self):
        return iter(range(1, len(self._pages) + 1))

    def get_fragments(self, page):
        return self._pages[page - 1]


@pytest.mark.unit
def test_pages_joined_in_order_with_trailing_newlines():
    """Fragments are space-joined per page; every page ends with a newline."""
    pages = [["Jane", "Doe", "Senior", "Engineer"], ["Skills:", "Python"], ["References"]]

    with patch(PDF_DOCUMENT, return_value=FakePDF(pages)):
        text = extract_text(b"%PDF-1.4 fake")

    assert text == "Jane Doe Senior Engineer\nSkills: Python\nReferences\n"


@pytest.mark.unit
def test_page_without_fragments_contributes_blank_line():
    with patch(PDF_DOCUMENT, return_value=FakePDF([["Cover"], [], ["End"]])):
        document = extract_document(b"%PDF-1.4 fake")

    assert document.pages == ("Cover", "", "End")
    assert document.text == "Cover\n\nEnd\n"
    assert document.page_count == 3


@pytest.mark.unit
@pytest.mark.parametrize("payload", [None, b""])
def test_empty_selection_raises(payload):
    """Nothing selected is an extraction error, not an empty document."""
    with patch(PDF_DOCUMENT) as pdf_cls:
        with pytest.raises(ExtractionError):
            extract_text(payload)

    pdf_cls.assert_not_called()


@pytest.mark.unit
def test_collaborator_failure_maps_to_extraction_error():
    """Any library exception becomes one ExtractionError with the cause chained."""
    broken = FakePDF([["ignored"]])
    broken.get_fragments = lambda page: (_ for _ in ()).throw(KeyError("/Root"))

    with patch(PDF_DOCUMENT, return_value=broken):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(b"not really a pdf")

    assert isinstance(exc_info.value.__cause__, KeyError)
    assert exc_info.value.user_message == "Failed to extract text from PDF."


@pytest.mark.unit
def test_failure_on_open_maps_to_extraction_error():
    with patch(PDF_DOCUMENT, side_effect=ValueError("bad header")):
        with pytest.raises(ExtractionError):
            extract_document(b"GIF89a")
