"""Centralized SQLModel imports to ensure metadata is populated."""

from app.backend.models import task as _task  # noqa: F401
