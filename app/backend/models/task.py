from sqlalchemy import Column, DateTime
from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from datetime import date, datetime, timezone
from typing import Optional

from app.core.status import TaskStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(SQLModel, table=True):
    task_id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str
    description: str
    # stored as the display value ("In Progress"), matched case-insensitively on filter
    status: str = Field(default=TaskStatus.PENDING.value, index=True)
    due_date: Optional[date] = None
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), index=True, nullable=False),
    )
