"""
Presentation Context

Responsibilities:
- Turns a ReviewResult into display-ready pieces (meters, suggestion lines,
  spelling-error lines)
- Lays those pieces out as terminal text

Owns: Per-suggestion shape dispatch and placeholders
Never: Parses model output or decides whether a review may run
"""

from reviewer.contexts.presentation.renderer import (
    INVALID_SUGGESTION,
    NO_SPELLING_ERRORS,
    Meter,
    RenderedReview,
    format_review_text,
    render_review,
    render_spelling_errors,
    render_suggestion,
)

__all__ = [
    "INVALID_SUGGESTION",
    "NO_SPELLING_ERRORS",
    "Meter",
    "RenderedReview",
    "format_review_text",
    "render_review",
    "render_spelling_errors",
    "render_suggestion",
]
