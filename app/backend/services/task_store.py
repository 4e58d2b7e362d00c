# app/backend/services/task_store.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date
from typing import Any, Iterator, List, Mapping, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.backend.models.task import Task
from app.core.errors import TaskNotFoundError, TaskValidationError, TransientError
from app.core.status import TaskStatus, parse_status

log = logging.getLogger(__name__)

# id / created_at are never writable through update()
_UPDATABLE = ("title", "description", "status", "due_date")
_STATUS_CHOICES = ", ".join(s.value for s in TaskStatus)


def _require_text(value: Any, label: str) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise TaskValidationError(f"{label} is required.")
    return text


def _require_status(value: Any) -> str:
    status = parse_status(value)
    if status is None:
        raise TaskValidationError(
            f"`{value}` is not a valid status. Expected one of: {_STATUS_CHOICES}."
        )
    return status.value


def _parse_id(task_id: str | UUID) -> Optional[UUID]:
    if isinstance(task_id, UUID):
        return task_id
    try:
        return UUID(str(task_id))
    except ValueError:
        return None


class TaskStore:
    """
    Task persistence on top of a SQLModel session.

    Every operation touches a single row and commits on its own; there are
    no multi-row transactions. Database failures are rolled back and raised
    as TransientError so callers never see driver details.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            log.exception("task store: %s failed", action)
            raise TransientError(f"Failed to {action}") from exc

    def list(self, status: Optional[str] = None) -> List[Task]:
        stmt = select(Task)
        if status:
            stmt = stmt.where(func.lower(Task.status) == status.lower())
        stmt = stmt.order_by(Task.created_at.desc())
        with self._guard("fetch tasks"):
            return list(self.db.exec(stmt).all())

    def get(self, task_id: str | UUID) -> Task:
        key = _parse_id(task_id)
        task = None
        if key is not None:
            with self._guard("retrieve task"):
                task = self.db.get(Task, key)
        if task is None:
            raise TaskNotFoundError("Task not found")
        return task

    def create(
        self,
        title: Optional[str],
        description: Optional[str],
        due_date: Optional[date] = None,
    ) -> Task:
        task = Task(
            title=_require_text(title, "Title"),
            description=_require_text(description, "Description"),
            due_date=due_date,
        )
        with self._guard("create task"):
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
        log.info("task created id=%s", task.task_id)
        return task

    def update(self, task_id: str | UUID, fields: Mapping[str, Any]) -> Task:
        task = self.get(task_id)

        changes: dict[str, Any] = {}
        for key in _UPDATABLE:
            if key not in fields:
                continue
            value = fields[key]
            if key in ("title", "description"):
                value = _require_text(value, key.capitalize())
            elif key == "status":
                value = _require_status(value)
            changes[key] = value

        for key, value in changes.items():
            setattr(task, key, value)
        with self._guard("update task"):
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
        log.info("task updated id=%s fields=%s", task.task_id, sorted(changes))
        return task

    def delete(self, task_id: str | UUID) -> None:
        task = self.get(task_id)
        key = task.task_id
        with self._guard("delete task"):
            self.db.delete(task)
            self.db.commit()
        log.info("task deleted id=%s", key)
