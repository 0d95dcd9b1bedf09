"""Pydantic models for deadline triage requests and responses."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from ..triage.models import HighlightDirective, ResolvedDeadline, Task, TriageResult


class TaskRecord(BaseModel):
    """A canvas node as read from graph storage."""

    id: str = Field(..., min_length=1)
    kind: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("kind", "type")
    )
    deadline: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "deadline", "structuredDeadline", "structured_deadline"
        ),
    )
    title: Optional[str] = None
    notes: Optional[str] = None
    label: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _flatten_node_data(cls, value: Any) -> Any:
        # Canvas nodes keep card fields under `data`; top-level keys win.
        if isinstance(value, dict) and isinstance(value.get("data"), dict):
            merged = dict(value["data"])
            merged.update({k: v for k, v in value.items() if k != "data"})
            return merged
        return value

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            kind=self.kind,
            deadline=self.deadline,
            title=self.title,
            notes=self.notes,
            label=self.label,
        )


class TriageRequest(BaseModel):
    """Incoming chat turn that may ask about deadlines."""

    tasks: List[TaskRecord] = Field(default_factory=list)
    user_date_time: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("userDateTime", "user_date_time"),
    )
    message: str = ""
    agent: Optional[str] = None


class ScanRequest(BaseModel):
    """Explicit "scan deadlines" request."""

    tasks: List[TaskRecord] = Field(default_factory=list)
    user_date_time: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("userDateTime", "user_date_time"),
    )


class IntentRequest(BaseModel):
    message: str = ""


class IntentResponse(BaseModel):
    intent: str


class DeadlineTask(BaseModel):
    """A task summary inside a triage bucket."""

    id: str
    label: str
    deadline: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    source: str

    @classmethod
    def from_resolved(cls, item: ResolvedDeadline) -> "DeadlineTask":
        return cls.model_validate(item.to_dict())


class TriageResultModel(BaseModel):
    overdue: List[DeadlineTask]
    today: List[DeadlineTask]
    tomorrow: List[DeadlineTask]
    upcoming: List[DeadlineTask]
    scanned: int
    summary: str

    @classmethod
    def from_result(cls, result: TriageResult) -> "TriageResultModel":
        return cls(
            overdue=[DeadlineTask.from_resolved(item) for item in result.overdue],
            today=[DeadlineTask.from_resolved(item) for item in result.today],
            tomorrow=[DeadlineTask.from_resolved(item) for item in result.tomorrow],
            upcoming=[DeadlineTask.from_resolved(item) for item in result.upcoming],
            scanned=result.scanned,
            summary=result.summary,
        )


class HighlightNodes(BaseModel):
    """Highlight directive in the shape the canvas client consumes."""

    node_ids: List[str] = Field(..., serialization_alias="nodeIds")
    color: str
    duration_ms: int = Field(..., serialization_alias="durationMs")

    @classmethod
    def from_directive(cls, directive: HighlightDirective) -> "HighlightNodes":
        return cls(
            node_ids=list(directive.task_ids),
            color=directive.color.value,
            duration_ms=directive.duration_ms,
        )


class TriageResponse(BaseModel):
    """Engine output for one chat turn."""

    intent: str
    reference_date: str = Field(..., serialization_alias="referenceDate")
    reference_source: str = Field(..., serialization_alias="referenceSource")
    triage: Optional[TriageResultModel] = None
    highlight_nodes: Optional[HighlightNodes] = Field(
        default=None, serialization_alias="highlightNodes"
    )
    context: Optional[str] = None
    system_prompt: Optional[str] = Field(
        default=None, serialization_alias="systemPrompt"
    )
    warning: Optional[str] = None


__all__ = [
    "DeadlineTask",
    "HighlightNodes",
    "IntentRequest",
    "IntentResponse",
    "ScanRequest",
    "TaskRecord",
    "TriageRequest",
    "TriageResponse",
    "TriageResultModel",
]
