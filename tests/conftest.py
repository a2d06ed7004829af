# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todoapp.core.state import AppState
from todoapp.tasks.task_store import TaskStore

from .fakes import FakeSnapshotSink


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace instead of config.Settings keeps tests isolated from the
    process environment and any local .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        console_enabled=False,
        data_dir=data_dir,
        snapshot_path=data_dir / "snapshot.json",
        restore_on_start=True,
        strict_ids=False,
        id_start=0,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def sink() -> FakeSnapshotSink:
    return FakeSnapshotSink()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, sink: FakeSnapshotSink) -> AppState:
    return AppState(settings=settings, task_store=store, snapshots=sink)
