# app/client/api.py
from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Optional

import httpx
from pydantic.alias_generators import to_camel

from app.backend.schemas.task import TaskOut
from app.core.config import settings
from app.core.errors import TaskNotFoundError, TaskValidationError, TransientError

log = logging.getLogger(__name__)


def _detail(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(data, dict) and data.get("detail"):
        return str(data["detail"])
    return f"HTTP {resp.status_code}"


class TaskApiClient:
    """
    Async wrapper around the /tasks endpoints.

    Response codes come back as the shared error taxonomy:
    400 -> TaskValidationError, 404 -> TaskNotFoundError,
    anything else (5xx, transport errors) -> TransientError.
    No retries and no timeout: a request that never answers stays pending.
    """

    def __init__(self, base_url: Optional[str] = None, *, http: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or settings.taskify_api_url).rstrip("/")
        self._http = http or httpx.AsyncClient(base_url=self.base_url, timeout=None)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            log.warning("%s %s failed: %s", method, path, exc)
            raise TransientError(f"{method} {path} failed: {exc}") from exc

        if resp.status_code == 400:
            raise TaskValidationError(_detail(resp))
        if resp.status_code == 404:
            raise TaskNotFoundError(_detail(resp))
        if resp.status_code >= 400:
            raise TransientError(_detail(resp))
        return resp

    async def list_tasks(self, status: Optional[str] = None) -> List[TaskOut]:
        params = {"status": status} if status else None
        resp = await self._request("GET", "/tasks", params=params)
        return [TaskOut.model_validate(item) for item in resp.json()]

    async def get_task(self, task_id: str) -> TaskOut:
        resp = await self._request("GET", f"/tasks/{task_id}")
        return TaskOut.model_validate(resp.json())

    async def create_task(
        self,
        title: str,
        description: str,
        due_date: Optional[date] = None,
    ) -> TaskOut:
        payload = {
            "title": title,
            "description": description,
            "dueDate": due_date.isoformat() if due_date else None,
        }
        resp = await self._request("POST", "/tasks", json=payload)
        return TaskOut.model_validate(resp.json())

    async def update_task(self, task_id: str, **fields: Any) -> TaskOut:
        payload = {
            to_camel(key): value.isoformat() if isinstance(value, date) else value
            for key, value in fields.items()
        }
        resp = await self._request("PUT", f"/tasks/{task_id}", json=payload)
        return TaskOut.model_validate(resp.json())

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")
