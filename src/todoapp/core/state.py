# src/todoapp/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import SnapshotSink


@dataclass
class AppState:
    # Settings object (config.Settings or a compatible namespace in tests).
    settings: Any

    task_store: TaskStore
    snapshots: SnapshotSink

    # Message shown under the input after a rejected add; cleared on the next valid one.
    validation_message: str | None = None

    lock: threading.RLock = field(default_factory=threading.RLock)
