"""Exceptions for the review context."""

from reviewer.utils.exceptions import ReviewerError


class ReviewError(ReviewerError):
    """Raised when a review could not be produced. No partial result exists."""

    user_message = "Failed to get review from the LLM."


class ReviewNetworkError(ReviewError):
    """Raised when the generation call fails in transport or is rejected (non-2xx)."""


class ReviewParseError(ReviewError):
    """
    Raised when the model answered but its text is not a JSON object.

    Both parsing tiers (whole text, then the braced substring) have failed.
    The raw model text is discarded.
    """

    user_message = "Could not parse AI response."
