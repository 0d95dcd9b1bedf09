"""Resolve one deadline per task, preferring structured data over inference."""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, Iterator, Optional

from ..utils.datetime_utils import parse_calendar_date
from .date_patterns import resolve_date
from .models import DeadlineSource, ResolvedDeadline, Task

logger = logging.getLogger(__name__)

DEFAULT_TACTICAL_KINDS = frozenset({"tactical"})

STRUCTURED_CONFIDENCE = 1.0
TITLE_CONFIDENCE = 0.8
NOTES_CONFIDENCE = 0.6


def is_tactical(task: Task, kinds: Iterable[str] = DEFAULT_TACTICAL_KINDS) -> bool:
    """Return True when ``task`` is an actionable card.

    Tasks without a kind tag are assumed to have been filtered by the caller.
    """

    if task.kind is None or not task.kind.strip():
        return True
    allowed = {kind.strip().lower() for kind in kinds}
    return task.kind.strip().lower() in allowed


def filter_tactical(
    tasks: Iterable[Task], kinds: Iterable[str] = DEFAULT_TACTICAL_KINDS
) -> list[Task]:
    allowed = tuple(kinds)
    return [task for task in tasks if is_tactical(task, allowed)]


def resolve_task_deadline(
    task: Task, reference_date: datetime.date
) -> Optional[ResolvedDeadline]:
    """Return the deadline for ``task`` or ``None`` when nothing can be found."""

    label = task.display_label

    if task.deadline is not None:
        structured = parse_calendar_date(task.deadline)
        if structured is not None:
            return ResolvedDeadline(
                task_id=task.id,
                label=label,
                date=structured,
                confidence=STRUCTURED_CONFIDENCE,
                source=DeadlineSource.STRUCTURED,
            )
        logger.debug(
            "Ignoring malformed structured deadline %r on task %s",
            task.deadline,
            task.id,
        )

    for text, confidence, source in (
        (task.title, TITLE_CONFIDENCE, DeadlineSource.TITLE),
        (task.notes, NOTES_CONFIDENCE, DeadlineSource.NOTES),
    ):
        inferred = resolve_date(text, reference_date)
        if inferred is not None:
            return ResolvedDeadline(
                task_id=task.id,
                label=label,
                date=inferred,
                confidence=confidence,
                source=source,
            )

    return None


def resolve_deadlines(
    tasks: Iterable[Task], reference_date: datetime.date
) -> Iterator[ResolvedDeadline]:
    """Yield resolved deadlines in task order, skipping unresolved tasks."""

    for task in tasks:
        resolved = resolve_task_deadline(task, reference_date)
        if resolved is not None:
            yield resolved


__all__ = [
    "DEFAULT_TACTICAL_KINDS",
    "NOTES_CONFIDENCE",
    "STRUCTURED_CONFIDENCE",
    "TITLE_CONFIDENCE",
    "filter_tactical",
    "is_tactical",
    "resolve_deadlines",
    "resolve_task_deadline",
]
