from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from app.backend.models.task import Task


def _date_part(value: Any) -> Any:
    # browsers send "2026-10-20T00:00:00.000Z" for date inputs; keep the calendar day
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    return value


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreate(_CamelModel):
    # emptiness is checked by the store so it can answer with its own message
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def normalize_due_date(cls, value: Any) -> Any:
        return _date_part(value)


class TaskUpdate(_CamelModel):
    """Partial update; only the keys present in the body are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[date] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def normalize_due_date(cls, value: Any) -> Any:
        return _date_part(value)


class TaskOut(_CamelModel):
    id: str
    title: str
    description: str
    status: str
    due_date: Optional[date] = None
    created_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> "TaskOut":
        return cls(
            id=str(task.task_id),
            title=task.title,
            description=task.description,
            status=task.status,
            due_date=task.due_date,
            created_at=task.created_at,
        )
