# src/todoapp/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- restores the TaskStore from the last snapshot (or starts empty),
- snapshots the store again on teardown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import SnapshotSink
from ..core.snapshots import FileSnapshotSink
from ..core.state import AppState
from ..tasks.task_ids import IdGenerator
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.snapshot_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, sink: SnapshotSink | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and sink are injectable for tests. If settings is None, falls back
    to get_settings(); if sink is None, a FileSnapshotSink at settings.snapshot_path.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if sink is None:
        sink = FileSnapshotSink(settings.snapshot_path)

    ids = IdGenerator(start=getattr(settings, "id_start", 0))
    strict_ids = bool(getattr(settings, "strict_ids", False))

    records = sink.load() if getattr(settings, "restore_on_start", True) else None
    if records is None:
        store = TaskStore(ids=ids, strict_ids=strict_ids)
        logger.info("Starting with an empty task list.")
    else:
        store = TaskStore.restore(records, ids=ids, strict_ids=strict_ids)

    return AppState(settings=settings, task_store=store, snapshots=sink)


def save_snapshot(state: AppState) -> None:
    """Teardown hook: hand the current snapshot to the sink (best-effort)."""
    try:
        with state.lock:
            records = state.task_store.snapshot()
        state.snapshots.save(records)
    except Exception:
        logger.exception("Failed to snapshot the task list.")
