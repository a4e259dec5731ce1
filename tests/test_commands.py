# tests/test_commands.py

from __future__ import annotations

from task_tracker.cli.commands import ADD_USAGE, CommandRegistry, registry
from task_tracker.core.state import AppState


def test_command_registry_routes_2_and_3_params(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_command_creates_task(state: AppState) -> None:
    reply = registry.handle(state, "/add Mua sách | Sách Công nghệ phần mềm. | 2025-07-20 | Cao")
    assert reply is not None and "id=1" in reply
    assert state.task_store.count_tasks() == 1

    reply = registry.handle(state, "/add mua SÁCH | | 2025-07-20 | Trung bình")
    assert reply is not None and "duplicate_task" in reply
    assert state.task_store.count_tasks() == 1


def test_add_command_usage(state: AppState) -> None:
    assert registry.handle(state, "/add only a title") == ADD_USAGE
    assert state.task_store.count_tasks() == 0


def test_status_and_help(state: AppState) -> None:
    status = registry.handle(state, "/status") or ""
    assert str(state.task_store.path) in status
    assert "Tasks: 0" in status

    help_text = registry.handle(state, "/help") or ""
    for name in ("/help", "/status", "/add", "/demo"):
        assert name in help_text


def test_demo_command_reports_summary(state: AppState) -> None:
    emitted: list[str] = []
    reply = registry.handle(state, "/demo", emit=emitted.append) or ""
    assert "2 added, 2 rejected" in reply
    assert any("duplicate_task" in line for line in emitted)
    assert state.task_store.count_tasks() == 2


def test_add_command_keeps_inner_whitespace(state: AppState) -> None:
    reply = registry.handle(state, "/add Mua   sách |  hai  chữ  | 2025-07-20 | Cao") or ""
    assert "id=1" in reply

    task = state.task_store.load()[0]
    assert task.title == "Mua   sách"
    assert task.description == "hai  chữ"


def test_raw_args_handler_gets_unsplit_remainder(state: AppState) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def raw(state, args):
        seen.append(args)
        return "ok"

    reg.register("raw", raw, "raw", raw_args=True)
    reg.register("split", lambda state, args: " ".join(f"<{a}>" for a in args), "split")

    reg.handle(state, "/raw a   b | c")
    reg.handle(state, "/raw")
    assert seen == [["a   b | c"], []]
    assert reg.handle(state, "/split a   b") == "<a> <b>"
