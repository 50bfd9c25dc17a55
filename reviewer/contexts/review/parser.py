"""
Model response parsing.

The model is asked for bare JSON but often wraps it in prose or a markdown
fence. Parsing tries two tiers in order:

1. The whole text as a JSON object.
2. The first greedy brace-delimited substring (first "{" through last "}").

The greedy match over-captures when the text holds two separate objects; the
combined span is then invalid JSON and the parse fails.
"""

import json
from typing import Any, Dict, Optional

from reviewer.contexts.review.exceptions import ReviewParseError
from reviewer.contexts.review.result import ReviewResult


def _load_object(text: str) -> Optional[Dict[str, Any]]:
    """JSON-decode text, returning None unless it is an object."""
    try:
        result = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        # Deeply nested arrays or objects exhaust the decoder stack
        return None
    return result if isinstance(result, dict) else None


def _parse_whole(text: str) -> Optional[Dict[str, Any]]:
    return _load_object(text)


def _parse_braced(text: str) -> Optional[Dict[str, Any]]:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return _load_object(text[start : end + 1])


def parse_review_text(text: str) -> ReviewResult:
    """
    Parse model text into a ReviewResult.

    Args:
        text: Raw text answer from the model

    Returns:
        ReviewResult built from the first tier that yields a JSON object

    Raises:
        ReviewParseError: If neither tier yields a JSON object
    """
    data = _parse_whole(text)
    if data is None:
        data = _parse_braced(text)
    if data is None:
        raise ReviewParseError(f"Model text is not a JSON object ({len(text)} characters)")
    return ReviewResult.from_dict(data)
