"""
todoapp: a small task-list state engine.

Add items, mark them done/undone, delete them; the list survives a
teardown/recreate of the host through TaskStore.snapshot()/restore().
"""

from .tasks import IdGenerator, NotFoundError, Task, TaskStore, TodoError, ValidationError

__version__ = "0.1.0"
__all__ = [
    "IdGenerator",
    "NotFoundError",
    "Task",
    "TaskStore",
    "TodoError",
    "ValidationError",
]
