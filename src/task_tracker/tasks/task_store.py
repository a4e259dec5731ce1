# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .task_models import Task, TaskSnapshot

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """
    JSON file task store.

    The file holds one JSON array of task objects, no envelope:
      [{"id": 1, "title": ..., "description": ..., "due_date": "YYYY-MM-DD",
        "priority": ..., "status": ...}, ...]

    Every call reads or writes the whole file; no handle is kept open between calls.
    Writes go to a sibling temp file first and are moved into place with os.replace.

    Array entries that fail validation are never dropped: load_snapshot() returns them
    as `unparsed` and save() writes them back verbatim after the valid tasks.
    """

    def __init__(self, path: str | Path = "tasks_database.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_snapshot(self) -> TaskSnapshot:
        """
        Read the whole file.

        Missing / unreadable / malformed file -> empty snapshot (logged, never raised).
        """
        empty = TaskSnapshot(tasks=[], unparsed=[])

        if not self._path.exists():
            logger.debug("Task store %s does not exist yet; starting empty.", self._path)
            return empty

        try:
            raw = self._path.read_text("utf-8")
        except OSError as e:
            logger.warning("Failed to read task store %s: %s", self._path, e)
            return empty

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Task store %s is not valid JSON (%s); treating as empty.", self._path, e)
            return empty

        if not isinstance(data, list):
            logger.warning(
                "Task store %s holds %s instead of an array; treating as empty.",
                self._path,
                type(data).__name__,
            )
            return empty

        tasks: list[Task] = []
        unparsed: list[Any] = []
        for i, entry in enumerate(data):
            try:
                tasks.append(Task.from_dict(entry))
            except ValueError as e:
                logger.warning("Keeping unparsed task entry #%d in %s as-is: %s", i, self._path, e)
                unparsed.append(entry)

        logger.debug(
            "Loaded %d tasks (%d unparsed) from %s", len(tasks), len(unparsed), self._path
        )
        return TaskSnapshot(tasks=tasks, unparsed=unparsed)

    def load(self) -> list[Task]:
        """Valid tasks only; see load_snapshot() for the full file contents."""
        return self.load_snapshot().tasks

    def save(self, tasks: Iterable[Task], unparsed: Iterable[Any] = ()) -> bool:
        """Replace the whole file with `tasks` + `unparsed`. Returns False on I/O failure."""
        entries = [t.to_dict() for t in tasks]
        entries.extend(unparsed)
        payload = json.dumps(entries, ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Failed to write task store %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False

        logger.debug("Saved task store %s", self._path)
        return True

    def count_tasks(self) -> int:
        return len(self.load())
