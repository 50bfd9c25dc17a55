"""
Review result data structures.

A ReviewResult is built from the model's JSON object on a best-effort basis:
fields the model omitted stay None (or empty for the lists) instead of
failing. Suggestions are resolved once here into one of three variants so
that rendering never re-inspects raw JSON.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class PlainText:
    """Suggestion given as free text."""

    text: str


@dataclass(frozen=True)
class ReplacePair:
    """Suggestion given as {"replace": ..., "with": ...}."""

    replace: str
    with_: str


@dataclass(frozen=True)
class Unrecognized:
    """Any other suggestion value, kept raw for last-resort display."""

    raw: Any


Suggestion = Union[PlainText, ReplacePair, Unrecognized]


def parse_suggestion(item: Any) -> Suggestion:
    """Resolve one raw suggestion from the model into its variant."""
    if isinstance(item, str):
        return PlainText(item)
    # Both members must be present and non-empty
    if isinstance(item, dict) and item.get("replace") and item.get("with"):
        return ReplacePair(replace=str(item["replace"]), with_=str(item["with"]))
    return Unrecognized(item)


def suggestion_to_json(suggestion: Suggestion) -> Any:
    """Inverse of parse_suggestion(), for JSON output."""
    if isinstance(suggestion, PlainText):
        return suggestion.text
    if isinstance(suggestion, ReplacePair):
        return {"replace": suggestion.replace, "with": suggestion.with_}
    return suggestion.raw


@dataclass(frozen=True)
class ReviewResult:
    """
    Structured critique returned by the model.

    Attributes:
        review: Short free-text summary
        ai_rating: Match rating, expected 0-100 (raw model value, not coerced)
        ats_score: Keyword/ATS score, expected 0-100 (raw model value, not coerced)
        suggestions: Improvement suggestions in model order
        spelling_errors: Misspellings in model order, possibly empty
    """

    review: Optional[str] = None
    ai_rating: Any = None
    ats_score: Any = None
    suggestions: Tuple[Suggestion, ...] = ()
    spelling_errors: Tuple[Any, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReviewResult":
        suggestions = data.get("suggestions")
        spelling_errors = data.get("spelling_errors")
        return cls(
            review=data.get("review"),
            ai_rating=data.get("ai_rating"),
            ats_score=data.get("ats_score"),
            suggestions=(
                tuple(parse_suggestion(s) for s in suggestions)
                if isinstance(suggestions, list)
                else ()
            ),
            spelling_errors=tuple(spelling_errors) if isinstance(spelling_errors, list) else (),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "review": self.review,
            "ai_rating": self.ai_rating,
            "ats_score": self.ats_score,
            "suggestions": [suggestion_to_json(s) for s in self.suggestions],
            "spelling_errors": list(self.spelling_errors),
        }
