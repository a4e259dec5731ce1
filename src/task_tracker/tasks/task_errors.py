# src/task_tracker/tasks/task_errors.py

"""
Tagged result type for task creation.

Callers branch on AddTaskResult.ok / error.kind instead of parsing messages.
unwrap() is there for code that prefers exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import cast

from .task_models import Task


class TaskErrorKind(StrEnum):
    EMPTY_TITLE = "empty_title"
    EMPTY_DUE_DATE = "empty_due_date"
    INVALID_PRIORITY = "invalid_priority"
    INVALID_DATE = "invalid_date"
    DUPLICATE_TASK = "duplicate_task"
    STORE_UNAVAILABLE = "store_unavailable"


@dataclass(frozen=True, slots=True)
class TaskError:
    kind: TaskErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class TaskValidationError(ValueError):
    """Raised by AddTaskResult.unwrap() for a failed result."""

    def __init__(self, error: TaskError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> TaskErrorKind:
        return self.error.kind


@dataclass(frozen=True, slots=True)
class AddTaskResult:
    task: Task | None = None
    error: TaskError | None = None

    def __post_init__(self) -> None:
        if (self.task is None) == (self.error is None):
            raise ValueError("AddTaskResult needs exactly one of task / error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, task: Task) -> AddTaskResult:
        return cls(task=task)

    @classmethod
    def failure(cls, kind: TaskErrorKind, message: str) -> AddTaskResult:
        return cls(error=TaskError(kind=kind, message=message))

    def unwrap(self) -> Task:
        if self.task is None:
            raise TaskValidationError(cast(TaskError, self.error))
        return self.task
