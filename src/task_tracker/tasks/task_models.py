# src/task_tracker/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Any

DATE_FORMAT = "%Y-%m-%d"
# ASCII digits only; \d would also accept fullwidth or Arabic-Indic digits.
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}", re.ASCII)
TASK_KEYS = ("id", "title", "description", "due_date", "priority", "status")


class Priority(StrEnum):
    """
    Closed, ordered set of priority levels.

    Values are the labels persisted in the JSON file.
    """

    LOW = "Thấp"
    MEDIUM = "Trung bình"
    HIGH = "Cao"

    @property
    def rank(self) -> int:
        return _PRIORITY_ORDER.index(self)

    @classmethod
    def labels(cls) -> list[str]:
        return [p.value for p in cls]

    @classmethod
    def parse(cls, raw: Priority | str | None) -> Priority | None:
        """Return the matching member, or None if raw is not one of the labels."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


_PRIORITY_ORDER = (Priority.LOW, Priority.MEDIUM, Priority.HIGH)


class TaskStatus(StrEnum):
    """
    Task status.

    Only NOT_COMPLETED is ever assigned; COMPLETED exists so files that carry it still load.
    """

    NOT_COMPLETED = "Chưa hoàn thành"
    COMPLETED = "Hoàn thành"


def parse_due_date(raw: str) -> date:
    """
    Strict YYYY-MM-DD parsing.

    Raises ValueError on surrounding whitespace, wrong separators, wrong component
    widths, non-ASCII digits or dates that do not exist in the calendar (2025-02-30).
    """
    if not _DATE_RE.fullmatch(raw):
        raise ValueError(f"not a YYYY-MM-DD date: {raw!r}")
    year, month, day = (int(part) for part in raw.split("-"))
    return date(year, month, day)


def format_due_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    description: str
    due_date: str  # YYYY-MM-DD
    priority: Priority
    status: TaskStatus = TaskStatus.NOT_COMPLETED

    def is_duplicate_of(self, title: str, due_date: str) -> bool:
        return self.title.casefold() == title.casefold() and self.due_date == due_date

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date,
            "priority": self.priority.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """Build a Task from one JSON object; raises ValueError if the entry is invalid."""
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")

        missing = [k for k in TASK_KEYS if k not in raw]
        if missing:
            raise ValueError(f"task entry is missing keys: {', '.join(missing)}")

        task_id = raw["id"]
        # bool is an int subclass; reject it explicitly.
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 1:
            raise ValueError(f"invalid task id: {task_id!r}")

        title = raw["title"]
        if not isinstance(title, str) or not title.strip():
            raise ValueError(f"task {task_id} has an empty title")

        due_raw = raw["due_date"]
        if not isinstance(due_raw, str):
            raise ValueError(f"task {task_id} has a non-string due_date")
        due_date = format_due_date(parse_due_date(due_raw))

        priority = Priority.parse(raw["priority"])
        if priority is None:
            raise ValueError(f"task {task_id} has unknown priority {raw['priority']!r}")

        status_raw = raw["status"]
        try:
            status = TaskStatus(status_raw)
        except ValueError:
            raise ValueError(f"task {task_id} has unknown status {status_raw!r}") from None

        description = raw["description"]
        if description is not None and not isinstance(description, str):
            raise ValueError(f"task {task_id} has a non-string description")

        return cls(
            id=task_id,
            title=title,
            description=description or "",
            due_date=due_date,
            priority=priority,
            status=status,
        )


@dataclass(frozen=True, slots=True)
class TaskSnapshot:
    """
    Full contents of a store file.

    `tasks` are the entries that validate; `unparsed` are the raw entries that do not.
    Unparsed entries are written back untouched and their ids stay reserved.
    """

    tasks: list[Task]
    unparsed: list[Any]

    def reserved_ids(self) -> list[int]:
        ids = [t.id for t in self.tasks]
        for entry in self.unparsed:
            raw_id = entry.get("id") if isinstance(entry, dict) else None
            if isinstance(raw_id, int) and not isinstance(raw_id, bool):
                ids.append(raw_id)
        return ids
