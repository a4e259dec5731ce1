# src/task_tracker/cli/demo.py

"""
Demo driver: four add_task calls with fixed inputs.

Run with `task-tracker-demo` (or `python -m task_tracker.cli.demo`).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import cast

from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_errors import AddTaskResult, TaskError
from ..tasks.task_manager import TaskManager
from .bootstrap import create_initial_state

logger = logging.getLogger(__name__)

DEMO_STEPS: list[tuple[str, tuple[str, str, str, str]]] = [
    ("Valid task", ("Mua sách", "Sách Công nghệ phần mềm.", "2025-07-20", "Cao")),
    ("Duplicate task", ("Mua sách", "Sách Công nghệ phần mềm.", "2025-07-20", "Cao")),
    ("Another task", ("Tập thể dục", "Tập gym 1 tiếng.", "2025-07-21", "Trung bình")),
    ("Task with empty title", ("", "Nhiệm vụ không có tiêu đề.", "2025-07-22", "Thấp")),
]


def describe_result(result: AddTaskResult) -> str:
    if result.task is not None:
        return f"Added task id={result.task.id}: {result.task.to_dict()}"
    error = cast(TaskError, result.error)
    return f"Error [{error.kind}]: {error.message}"


def run_demo(manager: TaskManager, emit: Callable[[str], None] = print) -> list[AddTaskResult]:
    results: list[AddTaskResult] = []
    for label, args in DEMO_STEPS:
        emit(f"\n{label}:")
        result = manager.add_task(*args)
        emit(describe_result(result))
        results.append(result)
    logger.info("Demo finished: %d of %d calls succeeded.", sum(r.ok for r in results), len(results))
    return results


def main() -> None:
    settings = get_settings()
    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    state = create_initial_state(settings=settings)
    run_demo(state.task_manager)


if __name__ == "__main__":
    main()
