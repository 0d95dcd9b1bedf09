"""Deadline resolution and task triage domain package."""

from .classifier import classify
from .date_patterns import resolve_date
from .intent import route_intent
from .models import (
    DeadlineSource,
    HighlightColor,
    HighlightDirective,
    Intent,
    ResolvedDeadline,
    Task,
    TriageResult,
)
from .projector import build_prompt_context, project_highlight
from .resolver import resolve_task_deadline
from .service import TriageOutcome, TriageService

__all__ = [
    "DeadlineSource",
    "HighlightColor",
    "HighlightDirective",
    "Intent",
    "ResolvedDeadline",
    "Task",
    "TriageOutcome",
    "TriageResult",
    "TriageService",
    "build_prompt_context",
    "classify",
    "project_highlight",
    "resolve_date",
    "resolve_task_deadline",
    "route_intent",
]
