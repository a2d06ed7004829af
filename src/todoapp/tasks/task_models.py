# src/todoapp/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace


class TodoError(Exception):
    """Base class for task engine errors (all of them are recoverable)."""


class ValidationError(TodoError, ValueError):
    """Raised by TaskStore.add when the trimmed input is empty."""


class NotFoundError(TodoError, KeyError):
    """Raised by toggle/delete for an unknown id (only in strict_ids mode)."""

    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"task not found: id={self.task_id}"


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    label: str
    is_done: bool = False

    def toggled(self) -> Task:
        return replace(self, is_done=not self.is_done)
