# app/core/errors.py
"""Error taxonomy shared by the task store, the HTTP layer and the client."""


class TaskError(Exception):
    """Base class for task failures surfaced to callers."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TaskValidationError(TaskError):
    """Bad or missing input. Never retried."""


class TaskNotFoundError(TaskError):
    """Unknown task id. Never retried."""


class TransientError(TaskError):
    """Store or network unavailable."""
