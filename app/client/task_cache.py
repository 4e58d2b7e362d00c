# app/client/task_cache.py
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional

from app.backend.schemas.task import TaskOut
from app.client.api import TaskApiClient
from app.client.notices import Failure, Info, Notice, Success
from app.core.errors import TaskError, TaskNotFoundError
from app.core.status import TaskStatus, advance

log = logging.getLogger(__name__)

ALL = "All"

# marker for "keep the active filter" in refresh()
_KEEP = object()

Listener = Callable[[Notice], None]


def _normalize_filter(status_filter: Optional[str]) -> Optional[str]:
    if not status_filter or status_filter == ALL:
        return None
    return status_filter


def is_overdue(task: TaskOut, today: Optional[date] = None) -> bool:
    """Due before today and not yet completed."""
    if task.due_date is None or task.status == TaskStatus.COMPLETED.value:
        return False
    return task.due_date < (today or date.today())


class TaskCache:
    """
    Client-side mirror of the visible task list.

    The list is always replaced wholesale from the server (no merging).
    Status changes are applied locally first and rolled back to a snapshot
    of the whole list if the server rejects them. Create and delete wait
    for the server and then re-fetch.

    Concurrent advances on different tasks are allowed; each keeps its own
    snapshot, and responses are applied in the order they resolve.
    """

    def __init__(self, api: TaskApiClient, status_filter: Optional[str] = None):
        self.api = api
        self.tasks: List[TaskOut] = []
        self.status_filter: Optional[str] = _normalize_filter(status_filter)
        self.loading = False
        self.error: Optional[str] = None
        self.last_notice: Optional[Notice] = None
        self._listeners: List[Listener] = []

    # ---- notifications ----

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _notify(self, notice: Notice) -> None:
        self.last_notice = notice
        for listener in list(self._listeners):
            listener(notice)

    # ---- local state ----

    def find(self, task_id: str) -> Optional[TaskOut]:
        return next((t for t in self.tasks if t.id == task_id), None)

    def snapshot(self) -> List[TaskOut]:
        # entries are replaced, never mutated, so a shallow copy is a full snapshot
        return list(self.tasks)

    def rollback(self, snapshot: List[TaskOut]) -> None:
        self.tasks = list(snapshot)

    # ---- server round trips ----

    async def refresh(self, status_filter=_KEEP) -> List[TaskOut]:
        """Re-fetch the list for the active filter (or a new one) and replace the cache."""
        if status_filter is not _KEEP:
            self.status_filter = _normalize_filter(status_filter)

        self.loading = True
        self.error = None
        try:
            self.tasks = await self.api.list_tasks(self.status_filter)
        except TaskError as exc:
            log.warning("task list fetch failed: %s", exc)
            self.error = f"Failed to load tasks. {exc}"
            self._notify(Failure("Failed to load tasks."))
        finally:
            self.loading = False
        return self.tasks

    async def set_filter(self, status_filter: Optional[str]) -> List[TaskOut]:
        return await self.refresh(status_filter)

    async def optimistic_advance(self, task_id: str) -> bool:
        """
        Move a task to its next status locally, then confirm with the server.
        Returns True when the server accepted the change.
        """
        task = self.find(task_id)
        if task is None:
            raise TaskNotFoundError(f"Task {task_id} is not in the local list")

        target = advance(task.status)
        snapshot = self.snapshot()
        self.tasks = [
            t.model_copy(update={"status": target.value}) if t.id == task_id else t
            for t in self.tasks
        ]
        self.error = None

        try:
            await self.api.update_task(task_id, status=target.value)
        except TaskError as exc:
            log.warning("status update failed for %s: %s", task_id, exc)
            self.rollback(snapshot)
            self._notify(Failure("Error updating status. Reverting change."))
            await self.refresh()
            self.error = f"Failed to update task status. {exc}"
            return False

        self._notify(Info(f'Status updated to "{target.value}"!'))
        return True

    async def create(
        self,
        title: str,
        description: str,
        due_date: Optional[date] = None,
    ) -> Optional[TaskOut]:
        self.loading = True
        self.error = None
        try:
            created = await self.api.create_task(title.strip(), description.strip(), due_date)
        except TaskError as exc:
            log.warning("task create failed: %s", exc)
            self.error = f"Failed to create task. {exc}"
            self._notify(Failure("Error creating task."))
            return None
        finally:
            self.loading = False

        await self.refresh()
        self._notify(Success(f'Task "{created.title}" created successfully!'))
        return created

    async def delete(self, task_id: str) -> bool:
        self.loading = True
        self.error = None
        try:
            await self.api.delete_task(task_id)
        except TaskError as exc:
            log.warning("task delete failed for %s: %s", task_id, exc)
            self.error = f"Failed to delete task. {exc}"
            self._notify(Failure("Error deleting task."))
            return False
        finally:
            self.loading = False

        await self.refresh()
        self._notify(Success("Task deleted successfully."))
        return True
