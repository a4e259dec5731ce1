# src/task_tracker/tasks/task_manager.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from ..core.ports import TaskRepo
from .task_errors import AddTaskResult, TaskErrorKind
from .task_models import Priority, Task, TaskStatus, format_due_date, parse_due_date

logger = logging.getLogger(__name__)


def next_task_id(reserved_ids: Iterable[int]) -> int:
    """Ids come from the store itself: max existing id + 1 (1 for an empty store)."""
    return max(reserved_ids, default=0) + 1


class TaskManager:
    """
    Validates new tasks and appends them to the repo.

    Each add_task() call is one load -> check -> append -> save cycle.
    The lock only serializes threads of this process; separate processes
    writing the same file can still lose updates.
    """

    def __init__(self, repo: TaskRepo) -> None:
        self._repo = repo
        self._lock = threading.Lock()

    @property
    def repo(self) -> TaskRepo:
        return self._repo

    def add_task(
        self,
        title: str | None,
        description: str | None,
        due_date: str | None,
        priority: Priority | str | None,
    ) -> AddTaskResult:
        result = self._add_task(title, description, due_date, priority)
        if result.task is not None:
            logger.info(
                "Task added id=%s title=%r due=%s priority=%s",
                result.task.id,
                result.task.title,
                result.task.due_date,
                result.task.priority.value,
            )
        elif result.error is not None:
            logger.warning("Task rejected (%s): %s", result.error.kind, result.error.message)
        return result

    def _add_task(
        self,
        title: str | None,
        description: str | None,
        due_date: str | None,
        priority: Priority | str | None,
    ) -> AddTaskResult:
        # Field checks: first failure wins, nothing is loaded yet.
        if title is None or not title.strip():
            return AddTaskResult.failure(TaskErrorKind.EMPTY_TITLE, "Title must not be empty.")
        if due_date is None or not due_date.strip():
            return AddTaskResult.failure(
                TaskErrorKind.EMPTY_DUE_DATE, "Due date must not be empty."
            )

        prio = Priority.parse(priority)
        if prio is None:
            return AddTaskResult.failure(
                TaskErrorKind.INVALID_PRIORITY,
                f"Invalid priority {priority!r}. Choose from: {', '.join(Priority.labels())}",
            )

        try:
            normalized_due = format_due_date(parse_due_date(due_date))
        except ValueError:
            return AddTaskResult.failure(
                TaskErrorKind.INVALID_DATE,
                f"Invalid due date {due_date!r}. Use the YYYY-MM-DD format.",
            )

        clean_title = title.strip()

        with self._lock:
            snapshot = self._repo.load_snapshot()
            tasks = list(snapshot.tasks)

            if any(t.is_duplicate_of(clean_title, normalized_due) for t in tasks):
                return AddTaskResult.failure(
                    TaskErrorKind.DUPLICATE_TASK,
                    f"Task '{clean_title}' already exists with the same due date.",
                )

            task = Task(
                id=next_task_id(snapshot.reserved_ids()),
                title=clean_title,
                description=description or "",
                due_date=normalized_due,
                priority=prio,
                status=TaskStatus.NOT_COMPLETED,
            )
            tasks.append(task)

            if not self._repo.save(tasks, snapshot.unparsed):
                return AddTaskResult.failure(
                    TaskErrorKind.STORE_UNAVAILABLE,
                    f"Could not save task '{clean_title}'; the store was not updated.",
                )

        return AddTaskResult.success(task)
