# src/todoapp/core/snapshots.py

"""
SnapshotSink implementations.

- MemorySnapshotSink: keeps the records in-process (embedded hosts, tests).
- FileSnapshotSink: JSON array of strings on local disk, so a console session
  can be torn down and recreated without losing the list.

Both are best-effort: a broken or missing snapshot means "start empty",
never a crash.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class MemorySnapshotSink:
    def __init__(self, records: list[str] | None = None) -> None:
        self._records: list[str] | None = None if records is None else list(records)

    def load(self) -> list[str] | None:
        return None if self._records is None else list(self._records)

    def save(self, records: list[str]) -> None:
        self._records = list(records)

    def clear(self) -> None:
        self._records = None


class FileSnapshotSink:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[str] | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except Exception:
            logger.exception("Failed to read snapshot from %s", self._path)
            return None

        if not isinstance(data, list):
            logger.warning("Snapshot at %s is not a list; ignoring it", self._path)
            return None

        records = [r if isinstance(r, str) else str(r) for r in data]
        logger.info("Loaded snapshot: %d records from %s", len(records), self._path)
        return records

    def save(self, records: list[str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            tmp.write_text(json.dumps(list(records), ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
            with contextlib.suppress(Exception):
                os.chmod(self._path, 0o600)
            logger.info("Saved snapshot: %d records to %s", len(records), self._path)
        except Exception:
            logger.exception("Failed to save snapshot to %s", self._path)

    def clear(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except Exception:
            logger.exception("Failed to remove snapshot %s", self._path)
