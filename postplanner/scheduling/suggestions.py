"""Example phrases offered to users when a schedule phrase is not understood."""

from typing import Dict, List, Tuple


SCHEDULING_SUGGESTIONS: Tuple[str, ...] = (
    "in 30 minutes",
    "in 2 hours",
    "tomorrow at 9am",
    "monday at 3pm",
    "this evening",
    "next week",
    "friday at 5:30pm",
    "2024-12-25 10:00",
)

# (input, description) pairs for the help endpoint
EXAMPLE_PHRASES: Tuple[Tuple[str, str], ...] = (
    ("tomorrow at 3pm", "Schedule for tomorrow at 3 PM"),
    ("in 2 hours", "Schedule for 2 hours from now"),
    ("monday at 9:30am", "Schedule for next Monday at 9:30 AM"),
    ("this evening", "Schedule for this evening (7 PM)"),
    ("next week", "Schedule for one week from today at 9 AM"),
)


def get_scheduling_suggestions() -> List[str]:
    """Return a fresh copy of the suggestion list."""
    return list(SCHEDULING_SUGGESTIONS)


def get_example_phrases() -> List[Dict[str, str]]:
    """Return the help examples as {"input", "description"} dicts."""
    return [{"input": phrase, "description": description} for phrase, description in EXAMPLE_PHRASES]
