"""
Review context logger.

Provides logging interface for review context with automatic [review] prefix.
All review modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from reviewer.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[review]"


def setup_review_logger(log_dir: Path, provider_name: str = None, verbose: bool = False) -> Path:
    """
    Setup logger for a review session.

    Args:
        log_dir: Directory for this review session
        provider_name: Provider/model label for the provenance header
        verbose: Show debug output on the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="review",
        log_dir=log_dir,
        extra_provenance={"LLM provider": provider_name} if provider_name else None,
        console_level="DEBUG" if verbose else "INFO",
    )


def _log_info(message: str) -> None:
    """Log info message with [review] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [review] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [review] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [review] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_review_start(provider_name: str, resume_chars: int, jd_chars: int) -> None:
    """Log start of a review request. Never logs credentials."""
    _log_info(f"Requesting review from {provider_name}")
    _log_debug(f"  Resume: {resume_chars} characters")
    _log_debug(f"  Job description: {jd_chars} characters")


def log_review_result(provider_name: str, response, result, elapsed_time: float) -> None:
    """
    Log a parsed review.

    Args:
        provider_name: Provider/model label
        response: LLMResponse the result was parsed from
        result: ReviewResult from parse_review_text()
        elapsed_time: Time taken by the request
    """
    _log_success(f"{provider_name}: review received ({elapsed_time:.2f}s)")
    _log_info(f"  AI rating: {result.ai_rating}, ATS score: {result.ats_score}")
    _log_debug(
        f"  {len(result.suggestions)} suggestion(s), "
        f"{len(result.spelling_errors)} spelling error(s)"
    )
    if response.input_tokens is not None:
        _log_debug(f"  Tokens: {response.input_tokens} in / {response.output_tokens} out")
