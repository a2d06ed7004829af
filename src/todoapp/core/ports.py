# src/todoapp/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the host.

The engine itself has no outbound dependencies; only the host talks to
the transient storage that keeps the last snapshot between runs.
"""

from typing import Protocol


class SnapshotSink(Protocol):
    """
    Where the host keeps the last TaskStore.snapshot().

    load() returns None when there is nothing to restore.
    Implementations must not raise on a missing snapshot.
    """

    def load(self) -> list[str] | None: ...
    def save(self, records: list[str]) -> None: ...
    def clear(self) -> None: ...
