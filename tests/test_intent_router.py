"""Tests for keyword intent routing."""

from __future__ import annotations

import pytest

from deadline_triage.triage.intent import route_intent
from deadline_triage.triage.models import Intent


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("what's overdue?", Intent.OVERDUE),
        ("What is due TODAY?", Intent.TODAY),
        ("anything for tomorrow", Intent.TOMORROW),
        ("show upcoming work", Intent.UPCOMING),
        ("anything urgent?", Intent.UPCOMING),
        ("scan deadlines", Intent.ALL),
        ("any deadlines?", Intent.ALL),
        ("is there a deadline", Intent.ALL),
        ("how's it going?", Intent.NONE),
    ],
)
def test_route_intent(message, expected):
    assert route_intent(message) is expected


def test_specific_words_win_over_generic_ones():
    assert route_intent("scan for overdue deadlines") is Intent.OVERDUE
    assert route_intent("deadlines due today or tomorrow") is Intent.TODAY
    assert route_intent("urgent things for tomorrow") is Intent.TOMORROW


@pytest.mark.parametrize("message", [None, "", "   "])
def test_empty_messages_are_ignored(message):
    assert route_intent(message) is Intent.NONE
