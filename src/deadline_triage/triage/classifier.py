"""Bucket resolved deadlines relative to a reference day."""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from .models import ResolvedDeadline, TriageResult


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def build_summary(result: TriageResult) -> str:
    """Return the sentence reported back to the user for ``result``."""

    return (
        f"Scanned {_plural(result.scanned, 'tactical task')}: "
        f"I found {len(result.overdue)} overdue, "
        f"{len(result.today)} due today, "
        f"{len(result.tomorrow)} due tomorrow, "
        f"and {result.more_upcoming} more coming up soon!"
    )


def classify(
    resolved: Iterable[ResolvedDeadline],
    reference_date: datetime.date,
    scanned: Optional[int] = None,
) -> TriageResult:
    """Sort ``resolved`` into overdue, today, tomorrow and upcoming buckets.

    Buckets keep the order the deadlines were supplied in. A task due today or
    tomorrow is also listed under upcoming. ``scanned`` is the number of
    tactical tasks inspected and defaults to the number of resolved ones.
    """

    items = list(resolved)
    tomorrow = reference_date + datetime.timedelta(days=1)
    result = TriageResult(
        reference_date=reference_date,
        scanned=len(items) if scanned is None else scanned,
    )

    for item in items:
        if item.date < reference_date:
            result.overdue.append(item)
            continue
        if item.date == reference_date:
            result.today.append(item)
        elif item.date == tomorrow:
            result.tomorrow.append(item)
        result.upcoming.append(item)

    result.summary = build_summary(result)
    return result


__all__ = ["build_summary", "classify"]
