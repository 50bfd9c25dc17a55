"""
Review Context

Responsibilities:
- Builds the review prompt from resume text and a job description
- Makes exactly one call to the configured LLM provider
- Parses the model's answer into a ReviewResult (all or nothing)

Owns: Prompt wording, response parsing tolerance, review error taxonomy
Never: Reads PDFs or formats results for display
"""

from reviewer.contexts.review.exceptions import (
    ReviewError,
    ReviewNetworkError,
    ReviewParseError,
)
from reviewer.contexts.review.parser import parse_review_text
from reviewer.contexts.review.prompt import REVIEW_KEYS, build_review_prompt
from reviewer.contexts.review.result import (
    PlainText,
    ReplacePair,
    ReviewResult,
    Suggestion,
    Unrecognized,
)
from reviewer.contexts.review.reviewer import ReviewRequest, request_review

__all__ = [
    "PlainText",
    "REVIEW_KEYS",
    "ReplacePair",
    "ReviewError",
    "ReviewNetworkError",
    "ReviewParseError",
    "ReviewRequest",
    "ReviewResult",
    "Suggestion",
    "Unrecognized",
    "build_review_prompt",
    "parse_review_text",
    "request_review",
]
