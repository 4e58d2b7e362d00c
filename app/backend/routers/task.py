# app/backend/routers/task.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlmodel import Session

from app.backend.schemas.task import TaskCreate, TaskOut, TaskUpdate
from app.backend.services.task_store import TaskStore
from app.core.errors import TaskNotFoundError, TaskValidationError, TransientError
from app.db.session import get_session

log = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def get_task_store(db: Session = Depends(get_session)) -> TaskStore:
    return TaskStore(db)


@router.get("", response_model=list[TaskOut])
def list_tasks(
    status: Optional[str] = Query(None, description="case-insensitive status filter"),
    store: TaskStore = Depends(get_task_store),
):
    try:
        tasks = store.list(status or None)
    except TransientError:
        raise HTTPException(status_code=500, detail="Failed to fetch tasks")
    return [TaskOut.from_task(t) for t in tasks]


@router.post("", response_model=TaskOut, status_code=201)
def create_task(body: TaskCreate, store: TaskStore = Depends(get_task_store)):
    try:
        task = store.create(body.title, body.description, body.due_date)
    except TaskValidationError as exc:
        log.info("task input rejected: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except TransientError:
        raise HTTPException(status_code=500, detail="Failed to create task")
    return TaskOut.from_task(task)


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    try:
        task = store.get(task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")
    except TransientError:
        raise HTTPException(status_code=500, detail="Failed to retrieve task")
    return TaskOut.from_task(task)


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: str,
    body: TaskUpdate,
    store: TaskStore = Depends(get_task_store),
):
    try:
        task = store.update(task_id, body.model_dump(exclude_unset=True))
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")
    except TaskValidationError as exc:
        log.info("task input rejected: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except TransientError:
        raise HTTPException(status_code=500, detail="Failed to update task")
    return TaskOut.from_task(task)


@router.delete("/{task_id}", status_code=204)
def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    try:
        store.delete(task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")
    except TransientError:
        raise HTTPException(status_code=500, detail="Failed to delete task")
    return Response(status_code=204)
