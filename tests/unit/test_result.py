"""Unit tests for ReviewResult construction and suggestion variants."""

import pytest

from reviewer.contexts.review.result import (
    PlainText,
    ReplacePair,
    ReviewResult,
    Unrecognized,
    parse_suggestion,
)


@pytest.mark.unit
def test_string_suggestion_is_plain_text():
    assert parse_suggestion("Add more metrics") == PlainText("Add more metrics")


@pytest.mark.unit
def test_replace_with_object_is_replace_pair():
    suggestion = parse_suggestion({"replace": "Did stuff", "with": "Shipped X"})

    assert suggestion == ReplacePair(replace="Did stuff", with_="Shipped X")


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    [
        {"replace": "", "with": "Shipped X"},
        {"replace": "Did stuff"},
        {"old": "a", "new": "b"},
        ["a", "b"],
        None,
        42,
    ],
)
def test_other_values_are_unrecognized(raw):
    """Anything but a string or a complete replace/with pair keeps its raw value."""
    assert parse_suggestion(raw) == Unrecognized(raw)


@pytest.mark.unit
def test_from_dict_ignores_non_list_collections():
    """Suggestions or spelling errors that are not arrays become empty."""
    result = ReviewResult.from_dict(
        {"review": "ok", "suggestions": "Add metrics", "spelling_errors": {"teh": "the"}}
    )

    assert result.suggestions == ()
    assert result.spelling_errors == ()


@pytest.mark.unit
def test_from_dict_keeps_raw_scores():
    """Scores are not coerced; the renderer decides how to show them."""
    result = ReviewResult.from_dict({"ai_rating": "85", "ats_score": 62.5})

    assert result.ai_rating == "85"
    assert result.ats_score == 62.5


@pytest.mark.unit
def test_to_dict_restores_model_shapes():
    """JSON output uses the model's field names and suggestion shapes."""
    data = {
        "review": "Good fit",
        "ai_rating": 75,
        "ats_score": 60,
        "suggestions": ["Add more metrics", {"replace": "a", "with": "b"}, {"tip": "x"}],
        "spelling_errors": ["teh"],
    }

    assert ReviewResult.from_dict(data).to_dict() == data
