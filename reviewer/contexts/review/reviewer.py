"""
Review Request Module

Sends a resume and job description to an LLM provider and parses the answer.
"""

import time
from dataclasses import dataclass

from reviewer.contexts.review.exceptions import ReviewNetworkError, ReviewParseError
from reviewer.contexts.review.logger import (
    _log_debug,
    _log_error,
    log_review_result,
    log_review_start,
)
from reviewer.contexts.review.parser import parse_review_text
from reviewer.contexts.review.prompt import build_review_prompt
from reviewer.contexts.review.result import ReviewResult
from reviewer.utils.llm import LLMProvider, LLMRequestError


@dataclass(frozen=True)
class ReviewRequest:
    """Resume text and job description submitted together."""

    resume_text: str
    job_description: str


def request_review(request: ReviewRequest, provider: LLMProvider) -> ReviewResult:
    """
    Request a structured review with a single provider call.

    Callers are responsible for checking both request fields are non-empty.

    Args:
        request: Resume text and job description
        provider: LLM provider to call once

    Returns:
        ReviewResult parsed from the model's answer

    Raises:
        ReviewNetworkError: If the provider call fails for any reason or is rejected
        ReviewParseError: If the answer is not a JSON object under either parsing tier
    """
    prompt = build_review_prompt(request.resume_text, request.job_description)
    log_review_start(provider.name, len(request.resume_text), len(request.job_description))
    start_time = time.time()

    try:
        response = provider.generate(prompt)
    except LLMRequestError as e:
        _log_error(f"{provider.name}: {e}")
        raise ReviewNetworkError(str(e)) from e
    except Exception as e:
        # SDK response shapes vary; anything a provider leaks is still a failed call
        _log_error(f"{provider.name}: unexpected {type(e).__name__}: {e}")
        raise ReviewNetworkError(f"Unexpected provider failure: {e}") from e

    try:
        result = parse_review_text(response.content)
    except ReviewParseError as e:
        _log_error(f"{provider.name}: {e}")
        _log_debug(f"  Response preview: {response.content[:200]!r}")
        raise

    log_review_result(provider.name, response, result, time.time() - start_time)
    return result
