"""
Extraction Context

Responsibilities:
- Reads an uploaded PDF held in memory
- Produces one plain-text string, pages in document order

Owns: PDF-to-text flattening
Never: Talks to the LLM or decides whether a review may run
"""

from reviewer.contexts.extraction.exceptions import ExtractionError
from reviewer.contexts.extraction.extractor import (
    ExtractedDocument,
    extract_document,
    extract_text,
)

__all__ = ["ExtractedDocument", "ExtractionError", "extract_document", "extract_text"]
