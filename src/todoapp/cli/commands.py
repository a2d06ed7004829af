# src/todoapp/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import NotFoundError, Task, ValidationError

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

EMPTY_INPUT_MESSAGE = "Please enter a non-empty item."

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
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

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
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
        lines.append("  (plain text without a leading / adds an item)")
        return "\n".join(lines)


registry = CommandRegistry()


def _format_task(task: Task) -> str:
    mark = "x" if task.is_done else " "
    return f"  [{mark}] #{task.id} {task.label}"


def render_task_lists(state: AppState) -> str:
    """Active section first, then Completed; both newest first."""
    store = state.task_store
    with state.lock:
        active = store.active_tasks()
        completed = store.completed_tasks()

    lines = [f"Active ({len(active)}):"]
    lines.extend(_format_task(t) for t in active)
    if not active:
        lines.append("  (nothing to do)")
    lines.append(f"Completed ({len(completed)}):")
    lines.extend(_format_task(t) for t in completed)
    if not completed:
        lines.append("  (none)")
    return "\n".join(lines)


def _parse_task_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def add_item(state: AppState, text: str) -> str:
    """Add one item from raw input; an empty input only sets the validation message."""
    try:
        with state.lock:
            task = state.task_store.add(text)
    except ValidationError:
        state.validation_message = EMPTY_INPUT_MESSAGE
        return EMPTY_INPUT_MESSAGE

    state.validation_message = None
    return f"Added #{task.id}: {task.label}\n" + render_task_lists(state)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    return add_item(state, " ".join(args))


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /done <id>"

    try:
        with state.lock:
            applied = state.task_store.toggle(task_id)
    except NotFoundError:
        applied = False

    if not applied:
        return f"No task with id={task_id}."
    return render_task_lists(state)


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /del <id>"

    try:
        with state.lock:
            applied = state.task_store.delete(task_id)
    except NotFoundError:
        applied = False

    if not applied:
        return f"No task with id={task_id}."
    return render_task_lists(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_lists(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    with state.lock:
        active = len(store.active_tasks())
        completed = len(store.completed_tasks())
        last_id = store.last_id
    snapshot_path = getattr(state.settings, "snapshot_path", None)
    strict = "ON" if getattr(state.settings, "strict_ids", False) else "OFF"
    return (
        "Status:\n"
        f"  Active: {active}\n"
        f"  Completed: {completed}\n"
        f"  Last id: {last_id}\n"
        f"  Strict ids: {strict}\n"
        f"  Snapshot: {snapshot_path or '(in memory)'}"
    )


def cmd_clear_snapshot(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /clear-snapshot -> forget the saved snapshot.
    The current list is kept and will be snapshotted again on exit.
    """
    if emit:
        with contextlib.suppress(Exception):
            emit("[SNAPSHOT] Removing saved snapshot...")
    state.snapshots.clear()
    logger.info("Snapshot cleared by user command.")
    return "Saved snapshot removed (the current list is snapshotted again on exit)."


registry.register("help", cmd_help, "Show this help.", aliases=["h", "?"])
registry.register("add", cmd_add, "Add an item: /add <text>.")
registry.register("done", cmd_toggle, "Mark an item done/undone: /done <id>.", aliases=["toggle"])
registry.register("del", cmd_delete, "Delete an item: /del <id>.", aliases=["rm", "delete"])
registry.register("list", cmd_list, "Show active and completed items.", aliases=["ls"])
registry.register("status", cmd_status, "Show counters and snapshot location.")
registry.register("clear-snapshot", cmd_clear_snapshot, "Forget the saved snapshot.")
