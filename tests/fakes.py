# tests/fakes.py
from __future__ import annotations

import json
from datetime import datetime, timedelta
from typing import Callable, Optional

import httpx

BASE_TIME = datetime(2026, 10, 19, 9, 0, 0)


def make_task(task_id: str, title: str, status: str = "Pending", minutes: int = 0, due: Optional[str] = None) -> dict:
    return {
        "id": task_id,
        "title": title,
        "description": f"{title} notes",
        "status": status,
        "dueDate": due,
        "createdAt": (BASE_TIME + timedelta(minutes=minutes)).isoformat(),
    }


class FakeTaskServer:
    """
    In-memory stand-in for the /tasks API, used as an httpx.MockTransport handler.

    - records (method, path, params) for every request
    - fail_updates=True makes PUT raise a connection error
    - on_request hook runs before a request is answered
    """

    def __init__(self, tasks: list[dict]):
        self.tasks = {t["id"]: dict(t) for t in tasks}
        self.fail_updates = False
        self.reject_updates: set[str] = set()
        self.requests: list[tuple[str, str, dict]] = []
        self.on_request: Optional[Callable[[httpx.Request], None]] = None
        self._seq = len(self.tasks)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path, dict(request.url.params)))
        if self.on_request:
            self.on_request(request)

        parts = request.url.path.strip("/").split("/")
        if parts == ["tasks"]:
            if request.method == "GET":
                return self._list(request.url.params.get("status"))
            if request.method == "POST":
                return self._create(json.loads(request.content))
        if len(parts) == 2 and parts[0] == "tasks":
            task_id = parts[1]
            if task_id not in self.tasks:
                return httpx.Response(404, json={"detail": "Task not found"})
            if request.method == "PUT":
                if self.fail_updates:
                    raise httpx.ConnectError("network down", request=request)
                if task_id in self.reject_updates:
                    return httpx.Response(400, json={"detail": "rejected"})
                self.tasks[task_id].update(json.loads(request.content))
                return httpx.Response(200, json=self.tasks[task_id])
            if request.method == "DELETE":
                del self.tasks[task_id]
                return httpx.Response(204)
            if request.method == "GET":
                return httpx.Response(200, json=self.tasks[task_id])
        return httpx.Response(405, json={"detail": "unsupported"})

    def _list(self, status: Optional[str]) -> httpx.Response:
        rows = list(self.tasks.values())
        if status:
            rows = [t for t in rows if t["status"].lower() == status.lower()]
        rows.sort(key=lambda t: t["createdAt"], reverse=True)
        return httpx.Response(200, json=rows)

    def _create(self, body: dict) -> httpx.Response:
        if not (body.get("title") or "").strip() or not (body.get("description") or "").strip():
            return httpx.Response(400, json={"detail": "Title is required."})
        self._seq += 1
        task = make_task(f"t{self._seq}", body["title"], minutes=self._seq)
        task["description"] = body["description"]
        task["dueDate"] = body.get("dueDate")
        self.tasks[task["id"]] = task
        return httpx.Response(201, json=task)

    def methods(self) -> list[str]:
        return [m for m, _, _ in self.requests]
