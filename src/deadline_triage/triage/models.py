"""Domain models for deadline resolution and task triage."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

UNTITLED_LABEL = "Untitled Task"


class Intent(str, Enum):
    """Which deadline bucket(s) a chat message asks about."""

    OVERDUE = "overdue"
    TODAY = "today"
    TOMORROW = "tomorrow"
    UPCOMING = "upcoming"
    ALL = "all"
    NONE = "none"


class HighlightColor(str, Enum):
    """Color tags understood by the canvas highlighter."""

    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    MULTI = "multi"


class DeadlineSource(str, Enum):
    """Where a resolved deadline was found."""

    STRUCTURED = "structured"
    TITLE = "title"
    NOTES = "notes"


@dataclass(slots=True)
class Task:
    """Tactical task card as supplied by graph storage."""

    id: str
    kind: Optional[str] = None
    deadline: Optional[str] = None
    title: Optional[str] = None
    notes: Optional[str] = None
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        for candidate in (self.label, self.title):
            if candidate and candidate.strip():
                return candidate.strip()
        return UNTITLED_LABEL


@dataclass(frozen=True, slots=True)
class ResolvedDeadline:
    """Calendar date resolved for a single task."""

    task_id: str
    label: str
    date: datetime.date
    confidence: float
    source: DeadlineSource

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.task_id,
            "label": self.label,
            "deadline": self.date.isoformat(),
            "confidence": self.confidence,
            "source": self.source.value,
        }


@dataclass(slots=True)
class TriageResult:
    """Tasks bucketed relative to a reference date.

    ``today`` and ``tomorrow`` are subsets of ``upcoming``; ``overdue`` never
    shares a task with ``upcoming``.
    """

    reference_date: datetime.date
    scanned: int
    overdue: List[ResolvedDeadline] = field(default_factory=list)
    today: List[ResolvedDeadline] = field(default_factory=list)
    tomorrow: List[ResolvedDeadline] = field(default_factory=list)
    upcoming: List[ResolvedDeadline] = field(default_factory=list)
    summary: str = ""

    @property
    def more_upcoming(self) -> int:
        """Upcoming tasks due after tomorrow."""

        return len(self.upcoming) - len(self.today) - len(self.tomorrow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "reference_date": self.reference_date.isoformat(),
            "scanned": self.scanned,
            "overdue": [item.to_dict() for item in self.overdue],
            "today": [item.to_dict() for item in self.today],
            "tomorrow": [item.to_dict() for item in self.tomorrow],
            "upcoming": [item.to_dict() for item in self.upcoming],
            "summary": self.summary,
        }


@dataclass(frozen=True, slots=True)
class HighlightDirective:
    """Task identifiers the canvas should emphasize, and how."""

    task_ids: Tuple[str, ...]
    color: HighlightColor
    duration_ms: int = 10_000


__all__ = [
    "DeadlineSource",
    "HighlightColor",
    "HighlightDirective",
    "Intent",
    "ResolvedDeadline",
    "Task",
    "TriageResult",
    "UNTITLED_LABEL",
]
