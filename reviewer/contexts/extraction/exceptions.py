"""Exceptions for the extraction context."""

from reviewer.utils.exceptions import ReviewerError


class ExtractionError(ReviewerError):
    """
    Raised when a PDF cannot be turned into text.

    Covers corrupt or non-PDF payloads, unsupported encodings, and an empty
    selection. No partial text is ever returned alongside this error.
    """

    user_message = "Failed to extract text from PDF."
