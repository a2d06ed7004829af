# src/todoapp/tasks/task_ids.py

from __future__ import annotations

import threading


class IdGenerator:
    """
    Monotonic task id counter.

    - next_id() increments first, so the first id is start + 1
    - the counter never goes down; advance_past() only raises it
    - owned by a TaskStore (no module-level singleton)
    """

    def __init__(self, start: int = 0) -> None:
        self._value = int(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def peek(self) -> int:
        """Last issued id (or the start value if nothing was issued yet)."""
        with self._lock:
            return self._value

    def advance_past(self, value: int) -> None:
        with self._lock:
            if value > self._value:
                self._value = value

    def __repr__(self) -> str:
        return f"IdGenerator(value={self._value})"
