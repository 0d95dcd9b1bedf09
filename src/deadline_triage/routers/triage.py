"""REST API endpoints for deadline triage."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request

from ..schemas.triage import (
    HighlightNodes,
    IntentRequest,
    IntentResponse,
    ScanRequest,
    TaskRecord,
    TriageRequest,
    TriageResponse,
    TriageResultModel,
)
from ..services.agent_prompts import DEADLINE_AGENT_PROMPT, build_agent_system_prompt
from ..services.time_context import ReferenceMoment, resolve_reference
from ..triage import Intent, Task, TriageOutcome, TriageService, route_intent

router = APIRouter(prefix="/api/deadlines", tags=["deadlines"])

_SERVER_TIME_WARNING = (
    "Local time was not provided; deadlines were checked against server time."
)


def get_triage_service(request: Request) -> TriageService:
    """Dependency to access the application's triage service."""
    service = getattr(request.app.state, "triage_service", None)
    if service is None:  # pragma: no cover - defensive
        raise RuntimeError("Triage service is not configured")
    return service


def get_server_timezone(request: Request) -> Optional[str]:
    settings = getattr(request.app.state, "settings", None)
    return getattr(settings, "server_timezone", None)


def _build_response(
    outcome: TriageOutcome, reference: ReferenceMoment
) -> TriageResponse:
    system_prompt = None
    if outcome.context is not None:
        system_prompt = build_agent_system_prompt(
            DEADLINE_AGENT_PROMPT, outcome.context
        )

    return TriageResponse(
        intent=outcome.intent.value,
        reference_date=reference.date.isoformat(),
        reference_source=reference.source.value,
        triage=(
            TriageResultModel.from_result(outcome.result)
            if outcome.result is not None
            else None
        ),
        highlight_nodes=(
            HighlightNodes.from_directive(outcome.highlight)
            if outcome.highlight is not None
            else None
        ),
        context=outcome.context,
        system_prompt=system_prompt,
        warning=None if reference.from_client else _SERVER_TIME_WARNING,
    )


def _to_tasks(records: list[TaskRecord]) -> list[Task]:
    return [record.to_task() for record in records]


@router.post("/triage", response_model=TriageResponse)
async def triage_message(
    payload: TriageRequest,
    service: TriageService = Depends(get_triage_service),
    server_timezone: Optional[str] = Depends(get_server_timezone),
) -> TriageResponse:
    """Route a chat message and triage the supplied tasks when it asks about deadlines."""
    reference = resolve_reference(
        payload.user_date_time, server_timezone=server_timezone
    )
    outcome = service.respond(
        payload.message,
        _to_tasks(payload.tasks),
        reference.date,
        agent=payload.agent,
    )
    return _build_response(outcome, reference)


@router.post("/scan", response_model=TriageResponse)
async def scan_deadlines(
    payload: ScanRequest,
    service: TriageService = Depends(get_triage_service),
    server_timezone: Optional[str] = Depends(get_server_timezone),
) -> TriageResponse:
    """Scan every supplied task regardless of any chat message."""
    reference = resolve_reference(
        payload.user_date_time, server_timezone=server_timezone
    )
    outcome = service.scan(_to_tasks(payload.tasks), reference.date, Intent.ALL)
    return _build_response(outcome, reference)


@router.post("/intent", response_model=IntentResponse)
async def classify_intent(payload: IntentRequest) -> IntentResponse:
    """Report which deadline bucket a message asks about."""
    return IntentResponse(intent=route_intent(payload.message).value)


__all__ = ["router", "get_triage_service"]
