# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskManager depends on TaskRepo rather than on JsonTaskStore,
so tests can hand it an in-memory or failing repo.
"""

from typing import Any, Iterable, Protocol

from ..tasks.task_models import Task, TaskSnapshot


class TaskRepo(Protocol):
    """Whole-collection persistence: load everything, save everything."""

    def load_snapshot(self) -> TaskSnapshot: ...

    def save(self, tasks: Iterable[Task], unparsed: Iterable[Any] = ()) -> bool: ...
