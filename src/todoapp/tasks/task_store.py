# src/todoapp/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from .state_codec import decode_tasks, encode_tasks
from .task_ids import IdGenerator
from .task_models import NotFoundError, Task, ValidationError

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task list.

    One ordered sequence (newest first) is the only storage:
    - active/completed are filters over it, computed on every read
    - toggle replaces a task with a flipped copy at the same index
    - ids come from the store's own IdGenerator and are never reused

    Unknown ids in toggle/delete are a no-op returning False,
    or NotFoundError when the store is built with strict_ids=True.

    Thread-safety:
    - every public method runs under one RLock (sequence + id allocation)
    """

    def __init__(
        self,
        tasks: Iterable[Task] | None = None,
        *,
        ids: IdGenerator | None = None,
        strict_ids: bool = False,
    ) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._ids = ids if ids is not None else IdGenerator()
        self._strict_ids = strict_ids
        self._lock = threading.RLock()

        if self._tasks:
            self._ids.advance_past(max(t.id for t in self._tasks))

    @classmethod
    def restore(
        cls,
        snapshot: Iterable[str] | None,
        *,
        ids: IdGenerator | None = None,
        strict_ids: bool = False,
    ) -> TaskStore:
        """Rebuild a store from a snapshot() result (None/empty -> empty store)."""
        ids = ids if ids is not None else IdGenerator()
        tasks = decode_tasks(snapshot, ids)
        logger.info("TaskStore restored total=%d last_id=%d", len(tasks), ids.peek())
        return cls(tasks, ids=ids, strict_ids=strict_ids)

    def snapshot(self) -> list[str]:
        with self._lock:
            return encode_tasks(self._tasks)

    # ---- mutations ----

    def add(self, raw_text: str) -> Task:
        label = (raw_text or "").strip()
        if not label:
            raise ValidationError("empty input")

        with self._lock:
            task = Task(id=self._ids.next_id(), label=label)
            self._tasks.insert(0, task)

        logger.debug("Task added id=%s", task.id)
        return task

    def toggle(self, task_id: int) -> bool:
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                return self._missing(task_id, "toggle")
            self._tasks[idx] = self._tasks[idx].toggled()
            done = self._tasks[idx].is_done

        logger.debug("Task toggled id=%s done=%s", task_id, done)
        return True

    def delete(self, task_id: int) -> bool:
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                return self._missing(task_id, "delete")
            del self._tasks[idx]

        logger.debug("Task deleted id=%s", task_id)
        return True

    # ---- views ----

    def tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def active_tasks(self) -> list[Task]:
        with self._lock:
            return [t for t in self._tasks if not t.is_done]

    def completed_tasks(self) -> list[Task]:
        with self._lock:
            return [t for t in self._tasks if t.is_done]

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            idx = self._index_of(task_id)
            return None if idx is None else self._tasks[idx]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    @property
    def last_id(self) -> int:
        return self._ids.peek()

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks())

    # ---- helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _missing(self, task_id: int, op: str) -> bool:
        logger.debug("Task %s ignored: unknown id=%s", op, task_id)
        if self._strict_ids:
            raise NotFoundError(task_id)
        return False
