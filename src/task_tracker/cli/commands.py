# src/task_tracker/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from .demo import describe_result, run_demo

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

ADD_USAGE = "Usage: /add <title> | <description> | <YYYY-MM-DD> | <priority>"


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[CommandHandler] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        """raw_args=True hands the handler the rest of the line unsplit, as a single arg."""
        aliases = aliases or []
        if raw_args:
            self._raw.add(handler)
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if handler in self._raw:
            args = [rest] if rest.strip() else []
        else:
            args = rest.split()

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    app_name = getattr(state.settings, "app_name", "task-tracker")
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  Store: {state.task_store.path}\n"
        f"  Tasks: {state.task_store.count_tasks()}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add Title | Description | 2025-07-20 | Cao

    Registered with raw_args, so inner whitespace of each field is kept.
    Description may be left empty ("Title | | 2025-07-20 | Cao").
    """
    fields = [f.strip() for f in (args[0] if args else "").split("|")]
    if len(fields) != 4:
        return ADD_USAGE

    title, description, due_date, priority = fields
    result = state.task_manager.add_task(title, description, due_date, priority)
    return describe_result(result)


def cmd_demo(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    lines: list[str] = []

    def collect(text: str) -> None:
        if emit:
            with contextlib.suppress(Exception):
                emit(text)
        else:
            lines.append(text)

    results = run_demo(state.task_manager, emit=collect)
    added = sum(1 for r in results if r.ok)
    lines.append(f"Demo finished: {added} added, {len(results) - added} rejected.")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show store path and task count.")
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add title | description | YYYY-MM-DD | priority.",
    raw_args=True,
)
registry.register("demo", cmd_demo, help_text="Run the four demo add_task calls.")
