# app/client/notices.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Notice:
    message: str
    kind: ClassVar[str] = "info"


@dataclass(frozen=True)
class Success(Notice):
    kind: ClassVar[str] = "success"


@dataclass(frozen=True)
class Failure(Notice):
    kind: ClassVar[str] = "error"


@dataclass(frozen=True)
class Info(Notice):
    kind: ClassVar[str] = "info"
