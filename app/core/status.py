# app/core/status.py
from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class TaskStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


# Completed reopens to Pending
_NEXT = {
    TaskStatus.PENDING: TaskStatus.IN_PROGRESS,
    TaskStatus.IN_PROGRESS: TaskStatus.COMPLETED,
    TaskStatus.COMPLETED: TaskStatus.PENDING,
}


def parse_status(value: Union[str, TaskStatus, None]) -> Optional[TaskStatus]:
    """Exact match against the enum values; None for anything else."""
    if isinstance(value, TaskStatus):
        return value
    try:
        return TaskStatus(value)
    except ValueError:
        return None


def advance(status: Union[str, TaskStatus]) -> TaskStatus:
    """
    Next status in the Pending -> In Progress -> Completed -> Pending cycle.
    Unrecognised values restart the cycle at Pending.
    """
    current = parse_status(status)
    if current is None:
        return TaskStatus.PENDING
    return _NEXT[current]
