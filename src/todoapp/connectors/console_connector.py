# src/todoapp/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import add_item, render_task_lists
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str, emit=None) -> str:
    """One user action: a slash command, or plain text to add as an item."""
    reply = command_registry.handle(state, line, emit=emit)
    if reply is not None:
        return reply
    return add_item(state, line)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", state.task_store.count())
    _print_ts("[CONSOLE] Type an item to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_task_lists(state))

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input("+ ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        print(reply)

    logger.info("Console connector finished.")
