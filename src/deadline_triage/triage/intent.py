"""Keyword routing of chat messages to deadline intents."""

from __future__ import annotations

from typing import Optional

from .models import Intent

# Checked in order; specific words must precede generic ones.
INTENT_KEYWORDS: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    (Intent.OVERDUE, ("overdue",)),
    (Intent.TODAY, ("today",)),
    (Intent.TOMORROW, ("tomorrow",)),
    (Intent.UPCOMING, ("upcoming", "urgent")),
    (Intent.ALL, ("scan", "deadline")),
)


def route_intent(message: Optional[str]) -> Intent:
    """Return the deadline intent expressed by ``message``."""

    if not message:
        return Intent.NONE

    lowered = message.lower()
    for intent, keywords in INTENT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return intent
    return Intent.NONE


__all__ = ["INTENT_KEYWORDS", "route_intent"]
