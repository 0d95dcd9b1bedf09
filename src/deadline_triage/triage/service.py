"""Service layer wiring resolution, classification, routing and projection."""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .classifier import classify
from .intent import route_intent
from .models import HighlightDirective, Intent, Task, TriageResult
from .projector import (
    DEFAULT_HIGHLIGHT_DURATION_MS,
    build_prompt_context,
    project_highlight,
)
from .resolver import DEFAULT_TACTICAL_KINDS, filter_tactical, resolve_deadlines

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TriageOutcome:
    """Everything a chat turn needs from the engine."""

    intent: Intent
    result: Optional[TriageResult] = None
    highlight: Optional[HighlightDirective] = None
    context: Optional[str] = None

    @property
    def triggered(self) -> bool:
        return self.result is not None


class TriageService:
    """Run deadline triage for chat turns and explicit scans."""

    def __init__(
        self,
        *,
        tactical_kinds: Iterable[str] = DEFAULT_TACTICAL_KINDS,
        deadline_agents: Optional[Iterable[str]] = None,
        highlight_duration_ms: int = DEFAULT_HIGHLIGHT_DURATION_MS,
    ) -> None:
        self._tactical_kinds = tuple(tactical_kinds)
        self._deadline_agents = (
            None
            if deadline_agents is None
            else frozenset(agent.strip().lower() for agent in deadline_agents)
        )
        self._highlight_duration_ms = highlight_duration_ms

    def tracks_deadlines(self, agent: Optional[str]) -> bool:
        """Return True when ``agent`` is allowed to trigger triage."""

        if self._deadline_agents is None or agent is None:
            return True
        return agent.strip().lower() in self._deadline_agents

    def triage(
        self, tasks: Sequence[Task], reference_date: datetime.date
    ) -> TriageResult:
        """Classify the tactical tasks in ``tasks`` against ``reference_date``."""

        tactical = filter_tactical(tasks, self._tactical_kinds)
        result = classify(
            resolve_deadlines(tactical, reference_date),
            reference_date,
            scanned=len(tactical),
        )
        logger.info("Deadline triage for %s: %s", reference_date, result.summary)
        return result

    def scan(
        self,
        tasks: Sequence[Task],
        reference_date: datetime.date,
        intent: Intent = Intent.ALL,
    ) -> TriageOutcome:
        """Triage ``tasks`` unconditionally and project ``intent``."""

        result = self.triage(tasks, reference_date)
        return TriageOutcome(
            intent=intent,
            result=result,
            highlight=project_highlight(
                intent, result, duration_ms=self._highlight_duration_ms
            ),
            context=build_prompt_context(result, intent),
        )

    def respond(
        self,
        message: Optional[str],
        tasks: Sequence[Task],
        reference_date: datetime.date,
        *,
        agent: Optional[str] = None,
    ) -> TriageOutcome:
        """Handle a chat message, running triage only for deadline queries."""

        if not self.tracks_deadlines(agent):
            return TriageOutcome(intent=Intent.NONE)

        intent = route_intent(message)
        if intent is Intent.NONE:
            return TriageOutcome(intent=intent)

        logger.debug("Message routed to %s intent", intent.value)
        return self.scan(tasks, reference_date, intent)


__all__ = ["TriageOutcome", "TriageService"]
