"""
Extraction context logger.

Provides logging interface for extraction context with automatic [extract] prefix.
All extraction modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[extract]"


def _log_info(message: str) -> None:
    """Log info message with [extract] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [extract] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [extract] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [extract] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_extraction_start(num_bytes: int, num_pages: int) -> None:
    pages = f"{num_pages} page(s)" if num_pages else "unknown page count"
    _log_info(f"Extracting text from PDF ({num_bytes} bytes, {pages})")


def log_extraction_result(document, elapsed_time: float) -> None:
    """
    Log a finished extraction.

    Args:
        document: ExtractedDocument from extract_document()
        elapsed_time: Time taken to extract
    """
    _log_success(
        f"Extracted {len(document.text)} characters from "
        f"{document.page_count} page(s) ({elapsed_time:.2f}s)"
    )
    for page_num, page_text in enumerate(document.pages, start=1):
        _log_debug(f"  Page {page_num}: {len(page_text)} characters")
