"""
Review session state.

One ReviewSession holds everything a single user's page needs: the extracted
resume text, the job description, a status per action, the last result, and
the user-facing error strings. Each action moves its status through
idle -> loading -> success | error and catches its own failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

from reviewer.contexts.extraction import ExtractionError, extract_document
from reviewer.contexts.review import ReviewError, ReviewRequest, ReviewResult, request_review
from reviewer.utils.llm import LLMProvider

NO_TEXT_FOUND = "No text found in PDF."


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ReviewSession:
    resume_text: str = ""
    job_description: str = ""
    extraction: Status = Status.IDLE
    review: Status = Status.IDLE
    result: Optional[ReviewResult] = None
    extraction_error: str = ""
    extraction_note: str = ""
    review_error: str = ""

    @property
    def can_review(self) -> bool:
        """Both inputs present and neither action in flight."""
        return (
            bool(self.resume_text.strip())
            and bool(self.job_description.strip())
            and self.extraction is not Status.LOADING
            and self.review is not Status.LOADING
        )

    def select_file(self, pdf_bytes: Optional[bytes]) -> None:
        """Replace the resume text with the text of a newly selected PDF."""
        self.extraction_error = ""
        self.extraction_note = ""
        self.resume_text = ""
        self.extraction = Status.LOADING

        try:
            document = extract_document(pdf_bytes)
        except ExtractionError as e:
            self.extraction = Status.ERROR
            self.extraction_error = e.user_message
            return

        self.resume_text = document.text
        self.extraction = Status.SUCCESS
        if not self.resume_text.strip():
            # Image-only or blank pages; the review action stays disabled
            logger.warning("Extracted PDF contains no text")
            self.extraction_note = NO_TEXT_FOUND

    def clear_file(self) -> None:
        """Forget the current resume, as when the file picker is emptied."""
        self.resume_text = ""
        self.extraction_error = ""
        self.extraction_note = ""
        self.extraction = Status.IDLE

    def set_job_description(self, text: Optional[str]) -> None:
        self.job_description = text or ""

    def request_review(self, provider: LLMProvider) -> Optional[ReviewResult]:
        """
        Run a review if one is currently allowed.

        Returns:
            The new ReviewResult, or None when the action was unavailable or failed
        """
        if not self.can_review:
            logger.debug("Review requested while unavailable; ignoring")
            return None

        self.review = Status.LOADING
        self.review_error = ""
        self.result = None

        try:
            result = request_review(
                ReviewRequest(self.resume_text, self.job_description), provider
            )
        except ReviewError as e:
            self.review = Status.ERROR
            self.review_error = e.user_message
            return None

        self.result = result
        self.review = Status.SUCCESS
        return result
