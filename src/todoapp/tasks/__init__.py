"""
Task engine.

Components:
- task_models.py: Task value object + error types
- task_ids.py: per-store monotonic id counter
- task_store.py: ordered task list, mutations and derived views
- state_codec.py: snapshot encoding (list of "id|done|label" strings)
"""

from .task_ids import IdGenerator
from .task_models import NotFoundError, Task, TodoError, ValidationError
from .task_store import TaskStore

__all__ = [
    "IdGenerator",
    "NotFoundError",
    "Task",
    "TaskStore",
    "TodoError",
    "ValidationError",
]
