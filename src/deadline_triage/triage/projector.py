"""Project triage results onto canvas highlights and prompt context."""

from __future__ import annotations

import json
from typing import Iterable, Optional

from .models import (
    HighlightColor,
    HighlightDirective,
    Intent,
    ResolvedDeadline,
    TriageResult,
)

DEFAULT_HIGHLIGHT_DURATION_MS = 10_000

_INTENT_COLORS = {
    Intent.OVERDUE: HighlightColor.RED,
    Intent.TODAY: HighlightColor.YELLOW,
    Intent.TOMORROW: HighlightColor.BLUE,
    Intent.UPCOMING: HighlightColor.BLUE,
    Intent.ALL: HighlightColor.MULTI,
}


def _unique_ids(items: Iterable[ResolvedDeadline]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for item in items:
        seen.setdefault(item.task_id, None)
    return tuple(seen)


def _bucket_for(intent: Intent, result: TriageResult) -> list[ResolvedDeadline]:
    if intent is Intent.OVERDUE:
        return result.overdue
    if intent is Intent.TODAY:
        return result.today
    if intent is Intent.TOMORROW:
        return result.tomorrow
    if intent is Intent.UPCOMING:
        return result.upcoming
    return [*result.overdue, *result.today, *result.tomorrow, *result.upcoming]


def project_highlight(
    intent: Intent,
    result: TriageResult,
    *,
    duration_ms: int = DEFAULT_HIGHLIGHT_DURATION_MS,
) -> Optional[HighlightDirective]:
    """Return the highlight directive for ``intent``, or None for ``Intent.NONE``.

    ``Intent.ALL`` merges every bucket in overdue, today, tomorrow, upcoming
    order and uses the ``multi`` tag so the canvas colors each task itself.
    """

    color = _INTENT_COLORS.get(intent)
    if color is None:
        return None
    return HighlightDirective(
        task_ids=_unique_ids(_bucket_for(intent, result)),
        color=color,
        duration_ms=duration_ms,
    )


def build_prompt_context(
    result: TriageResult, intent: Intent = Intent.ALL
) -> str:
    """Serialize ``result`` into a block appended to the language-model prompt."""

    payload = result.to_dict()
    payload["requested"] = intent.value
    lines = [
        "=" * 60,
        "DEADLINE TRIAGE RESULTS",
        "=" * 60,
        f"Reference date: {result.reference_date.isoformat()} "
        f"({result.reference_date.strftime('%A')})",
        f"Summary: {result.summary}",
        "",
        json.dumps(payload, indent=2, ensure_ascii=False),
        "=" * 60,
    ]
    return "\n".join(lines)


__all__ = [
    "DEFAULT_HIGHLIGHT_DURATION_MS",
    "build_prompt_context",
    "project_highlight",
]
