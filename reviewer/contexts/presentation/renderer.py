"""
Review rendering.

render_review() is shared by the CLI and the web page; format_review_text()
is the terminal layout.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from reviewer.contexts.review.result import PlainText, ReplacePair, ReviewResult, Suggestion

INVALID_SUGGESTION = "Invalid suggestion format"
NO_SPELLING_ERRORS = "None"

BAR_WIDTH = 20
BAR_FILLED = "█"
BAR_EMPTY = "░"


@dataclass(frozen=True)
class Meter:
    """A 0-100 score shown as a bar plus its raw value."""

    label: str
    value: Any

    @property
    def percent(self) -> Optional[float]:
        """Bar width in percent, clamped to 0-100. None for non-numeric values."""
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            return None
        return max(0.0, min(100.0, float(self.value)))

    @property
    def display(self) -> str:
        value = "" if self.value is None else self.value
        return f"{value} / 100"

    def bar(self, width: int = BAR_WIDTH) -> str:
        filled = 0 if self.percent is None else int(self.percent * width / 100 + 0.5)
        return BAR_FILLED * filled + BAR_EMPTY * (width - filled)


@dataclass(frozen=True)
class RenderedReview:
    summary: str
    rating: Meter
    ats: Meter
    suggestions: List[str] = field(default_factory=list)
    spelling_errors: List[str] = field(default_factory=list)


def render_suggestion(suggestion: Suggestion) -> str:
    """
    One display line for a suggestion.

    - PlainText: verbatim
    - ReplacePair: "Replace: <old> With: <new>"
    - Unrecognized object or array: compact JSON
    - anything else (null, numbers, booleans): INVALID_SUGGESTION
    """
    if isinstance(suggestion, PlainText):
        return suggestion.text
    if isinstance(suggestion, ReplacePair):
        return f"Replace: {suggestion.replace} With: {suggestion.with_}"
    if isinstance(suggestion.raw, (dict, list)):
        return json.dumps(suggestion.raw, separators=(",", ":"), ensure_ascii=False)
    return INVALID_SUGGESTION


def render_spelling_errors(errors: Iterable[Any]) -> List[str]:
    """One line per spelling error, or a single placeholder when there are none."""
    lines = [_spelling_line(error) for error in errors]
    return lines or [NO_SPELLING_ERRORS]


def _spelling_line(error: Any) -> str:
    if error is None:
        return ""
    if isinstance(error, (dict, list)):
        return json.dumps(error, separators=(",", ":"), ensure_ascii=False)
    return str(error)


def render_review(result: ReviewResult) -> RenderedReview:
    return RenderedReview(
        summary=result.review if result.review is not None else "",
        rating=Meter("AI Rating", result.ai_rating),
        ats=Meter("ATS Score", result.ats_score),
        suggestions=[render_suggestion(s) for s in result.suggestions],
        spelling_errors=render_spelling_errors(result.spelling_errors),
    )


def format_review_text(rendered: RenderedReview, bar_width: int = BAR_WIDTH) -> str:
    """
    Lay out a rendered review for the terminal.

    Example output:
        AI Review
        ─────────
        Good fit

        AI Rating: [███████████████░░░░░] 75 / 100
        ATS Score: [████████████░░░░░░░░] 60 / 100

        Suggestions:
          - Add more metrics

        Spelling Errors:
          - None
    """
    lines = ["AI Review", "─" * len("AI Review"), rendered.summary, ""]

    for meter in (rendered.rating, rendered.ats):
        lines.append(f"{meter.label}: [{meter.bar(bar_width)}] {meter.display}")
    lines.append("")

    lines.append("Suggestions:")
    lines.extend(f"  - {line}" for line in rendered.suggestions)
    lines.append("")

    lines.append("Spelling Errors:")
    lines.extend(f"  - {line}" for line in rendered.spelling_errors)

    return "\n".join(lines)
