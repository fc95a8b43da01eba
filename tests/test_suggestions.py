"""Tests for the help-text phrase lists."""

from postplanner.scheduling.suggestions import (
    EXAMPLE_PHRASES,
    SCHEDULING_SUGGESTIONS,
    get_example_phrases,
    get_scheduling_suggestions,
)


def test_example_phrases_shape():
    examples = get_example_phrases()

    assert len(examples) == len(EXAMPLE_PHRASES)
    for example in examples:
        assert set(example) == {"input", "description"}
        assert all(isinstance(value, str) for value in example.values())


def test_suggestions_are_a_fresh_copy():
    suggestions = get_scheduling_suggestions()
    suggestions.append("whenever")
    assert get_scheduling_suggestions() == list(SCHEDULING_SUGGESTIONS)
