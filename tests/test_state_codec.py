# tests/test_state_codec.py

from __future__ import annotations

import logging

import pytest

from todoapp.tasks.state_codec import SENTINEL, decode_task, decode_tasks, encode_task, encode_tasks
from todoapp.tasks.task_ids import IdGenerator
from todoapp.tasks.task_models import Task


def test_encode_format_escapes_delimiter() -> None:
    assert encode_task(Task(id=3, label="milk|eggs", is_done=True)) == f"3|1|milk{SENTINEL}eggs"
    assert encode_task(Task(id=4, label="bread")) == "4|0|bread"


def test_empty_sequences() -> None:
    assert encode_tasks([]) == []
    assert decode_tasks([], IdGenerator()) == []


def test_round_trip_preserves_order_and_fields() -> None:
    tasks = [
        Task(id=9, label="a|b|c", is_done=False),
        Task(id=4, label="  spaced  ", is_done=True),
        Task(id=1, label="plain", is_done=False),
    ]
    assert decode_tasks(encode_tasks(tasks), IdGenerator()) == tasks


def test_delimiter_label_survives() -> None:
    ids = IdGenerator()
    [task] = decode_tasks(encode_tasks([Task(id=1, label="milk|eggs")]), ids)
    assert task.label == "milk|eggs"


def test_unparsable_id_uses_generator() -> None:
    ids = IdGenerator(start=10)
    task = decode_task("abc|1|label", ids)
    assert task == Task(id=11, label="label", is_done=True)
    assert ids.peek() == 11


@pytest.mark.parametrize(
    ("record", "expected_done", "expected_label"),
    [
        ("5|1", True, ""),
        ("5", False, ""),
        ("5|yes|x", False, "x"),
        ("5|0|", False, ""),
    ],
)
def test_degraded_records(record: str, expected_done: bool, expected_label: str) -> None:
    task = decode_task(record, IdGenerator())
    assert task.id == 5
    assert task.is_done is expected_done
    assert task.label == expected_label


def test_empty_record_gets_fresh_id() -> None:
    ids = IdGenerator()
    task = decode_task("", ids)
    assert task == Task(id=1, label="", is_done=False)


def test_id_field_is_strict_integer() -> None:
    ids = IdGenerator()
    assert decode_task(" 5|0|x", ids).id == 1
    assert decode_task("1_0|0|x", ids).id == 2


def test_fallback_ids_do_not_collide_with_later_records() -> None:
    ids = IdGenerator()
    tasks = decode_tasks(["oops|0|a", "1|0|b", "2|1|c"], ids)

    assert [t.id for t in tasks] == [3, 1, 2]
    assert len({t.id for t in tasks}) == 3


def test_duplicate_ids_are_reassigned(caplog: pytest.LogCaptureFixture) -> None:
    ids = IdGenerator()
    with caplog.at_level(logging.WARNING, logger="todoapp.tasks.state_codec"):
        tasks = decode_tasks(["4|0|a", "4|1|b"], ids)

    assert [t.id for t in tasks] == [4, 5]
    assert [t.label for t in tasks] == ["a", "b"]
    assert "duplicates id=4" in caplog.text


def test_non_string_records_are_tolerated() -> None:
    tasks = decode_tasks([12, None], IdGenerator())  # type: ignore[list-item]
    assert len(tasks) == 2
    assert tasks[0].id == 12
    assert tasks[1].label == ""
