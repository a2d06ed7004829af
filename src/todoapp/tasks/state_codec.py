# src/todoapp/tasks/state_codec.py

"""
Snapshot codec: task sequence <-> flat list of strings.

Record format (one string per task, store order):

    "<id>|<done>|<label>"

- done is "1" or "0"
- every "|" inside the label is replaced by SENTINEL before encoding,
  so splitting on the first two delimiters is always safe

Decoding never raises. Broken records degrade to a best-effort Task:
- unparsable id -> fresh id from the generator
- done flag other than "1" -> not done
- missing label segment -> empty label
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .task_ids import IdGenerator
from .task_models import Task

logger = logging.getLogger(__name__)

DELIMITER = "|"
SENTINEL = "\u0001"

_DONE = "1"
_NOT_DONE = "0"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _escape(label: str) -> str:
    return label.replace(DELIMITER, SENTINEL)


def _unescape(raw: str) -> str:
    return raw.replace(SENTINEL, DELIMITER)


def _parse_id(raw: str | None) -> int | None:
    if raw is None or not _INT_RE.fullmatch(raw):
        return None
    return int(raw)


def encode_task(task: Task) -> str:
    flag = _DONE if task.is_done else _NOT_DONE
    return f"{task.id}{DELIMITER}{flag}{DELIMITER}{_escape(task.label)}"


def encode_tasks(tasks: Iterable[Task]) -> list[str]:
    return [encode_task(t) for t in tasks]


def decode_task(record: str, ids: IdGenerator) -> Task:
    """Decode one record. `ids` supplies the fallback id for a corrupt id field."""
    parts = str(record).split(DELIMITER, 2)

    task_id = _parse_id(parts[0] if parts else None)
    if task_id is None:
        task_id = ids.next_id()
        logger.warning("Snapshot record has no valid id; assigned id=%s", task_id)

    is_done = len(parts) > 1 and parts[1] == _DONE

    if len(parts) > 2:
        label = _unescape(parts[2])
    else:
        label = ""
        logger.warning("Snapshot record id=%s has no label segment", task_id)

    return Task(id=task_id, label=label, is_done=is_done)


def decode_tasks(records: Iterable[str] | None, ids: IdGenerator) -> list[Task]:
    """
    Decode a whole snapshot in order.

    The generator is first advanced past every valid stored id, so fallback ids
    handed out for corrupt records can't collide with ids restored later in the
    same snapshot. A duplicated stored id is reassigned a fresh one.
    """
    if not records:
        return []

    raw = [str(r) for r in records]

    stored = [_parse_id(r.split(DELIMITER, 1)[0]) for r in raw]
    valid = [i for i in stored if i is not None]
    if valid:
        ids.advance_past(max(valid))

    out: list[Task] = []
    seen: set[int] = set()
    for pos, record in enumerate(raw):
        task = decode_task(record, ids)
        if task.id in seen:
            new_id = ids.next_id()
            logger.warning(
                "Snapshot record #%d duplicates id=%s; reassigned id=%s", pos, task.id, new_id
            )
            task = Task(id=new_id, label=task.label, is_done=task.is_done)
        seen.add(task.id)
        out.append(task)

    logger.debug("Decoded snapshot: %d records", len(out))
    return out
