# tests/test_commands.py

from __future__ import annotations

from todoapp.cli.commands import EMPTY_INPUT_MESSAGE, CommandRegistry, registry
from todoapp.connectors.console_connector import handle_line

from .fakes import FakeSnapshotSink


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=lambda _: None) == "h3"
    assert called["h2"] == 1
    assert called["h3"] == 1


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_plain_text_adds_item(state) -> None:
    reply = handle_line(state, "Buy milk")
    assert "Added #1: Buy milk" in reply
    assert [t.label for t in state.task_store.active_tasks()] == ["Buy milk"]


def test_empty_add_sets_validation_message(state) -> None:
    assert handle_line(state, "/add   ") == EMPTY_INPUT_MESSAGE
    assert handle_line(state, "") == EMPTY_INPUT_MESSAGE
    assert state.validation_message == EMPTY_INPUT_MESSAGE
    assert state.task_store.count() == 0

    handle_line(state, "/add Call home")
    assert state.validation_message is None


def test_done_and_del_commands(state) -> None:
    handle_line(state, "Buy milk")
    handle_line(state, "Call home")

    reply = handle_line(state, "/done 1")
    assert "[x] #1 Buy milk" in reply
    assert [t.label for t in state.task_store.completed_tasks()] == ["Buy milk"]

    handle_line(state, "/toggle #1")
    assert state.task_store.completed_tasks() == []

    handle_line(state, "/rm 2")
    assert [t.label for t in state.task_store.tasks()] == ["Buy milk"]


def test_bad_or_unknown_ids(state) -> None:
    assert handle_line(state, "/done") == "Usage: /done <id>"
    assert handle_line(state, "/del abc") == "Usage: /del <id>"
    assert handle_line(state, "/done 42") == "No task with id=42."
    assert handle_line(state, "/del 42") == "No task with id=42."


def test_unknown_id_message_in_strict_mode(state, settings) -> None:
    from todoapp.tasks.task_store import TaskStore

    state.task_store = TaskStore(strict_ids=True)
    settings.strict_ids = True
    assert handle_line(state, "/done 7") == "No task with id=7."
    assert "Strict ids: ON" in handle_line(state, "/status")


def test_list_renders_both_sections(state) -> None:
    handle_line(state, "a")
    handle_line(state, "b")
    handle_line(state, "/done 1")

    out = handle_line(state, "/list")
    active_part, completed_part = out.split("Completed")
    assert "Active (1):" in active_part
    assert "#2 b" in active_part
    assert "(1):" in completed_part
    assert "#1 a" in completed_part


def test_clear_snapshot_command(state, sink: FakeSnapshotSink) -> None:
    sink.stored = ["1|0|x"]
    notes: list[str] = []

    reply = registry.handle(state, "/clear-snapshot", emit=notes.append)

    assert reply is not None and "removed" in reply
    assert sink.cleared == 1
    assert sink.stored is None
    assert notes
