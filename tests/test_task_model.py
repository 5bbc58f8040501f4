from __future__ import annotations

import json
from uuid import UUID

import pytest
from pydantic import ValidationError

from todo_cli.models import Task, dump_tasks, parse_tasks


def test_new_task_defaults() -> None:
    task = Task(title="buy milk")
    assert task.title == "buy milk"
    assert task.is_completed is False
    assert isinstance(task.id, UUID)


def test_ids_are_unique() -> None:
    ids = {Task(title="same").id for _ in range(50)}
    assert len(ids) == 50


def test_rendering_shows_completion_mark() -> None:
    task = Task(title="buy milk")
    assert str(task) == "buy milk - ❌"
    task.is_completed = True
    assert str(task) == "buy milk - ✅"


def test_id_cannot_be_reassigned() -> None:
    task = Task(title="x")
    with pytest.raises(ValidationError):
        task.id = Task(title="y").id


def test_empty_title_is_allowed() -> None:
    assert str(Task(title="")) == " - ❌"


def test_serialized_field_labels() -> None:
    task = Task(title="write report", is_completed=True)
    data = json.loads(dump_tasks([task]))
    assert data == [
        {"id": str(task.id), "title": "write report", "isCompleted": True}
    ]


def test_empty_snapshot_encodes_as_empty_array() -> None:
    assert json.loads(dump_tasks([])) == []
    assert parse_tasks(b"[]") == []


def test_parse_accepts_uppercase_uuid() -> None:
    raw = (
        '[{"id": "E621E1F8-C36C-495A-93FC-0C247A3E6E5F", '
        '"title": "a", "isCompleted": false}]'
    )
    (task,) = parse_tasks(raw)
    assert task.id == UUID("e621e1f8-c36c-495a-93fc-0c247a3e6e5f")


def test_parse_rejects_missing_fields() -> None:
    with pytest.raises(ValidationError):
        parse_tasks('[{"title": "no id or flag"}]')


def test_parse_rejects_loosely_typed_flag() -> None:
    with pytest.raises(ValidationError):
        parse_tasks(
            '[{"id": "e621e1f8-c36c-495a-93fc-0c247a3e6e5f", '
            '"title": "a", "isCompleted": "yes"}]'
        )


def test_parse_rejects_non_array_document() -> None:
    with pytest.raises(ValidationError):
        parse_tasks('{"todos": []}')


def test_snapshot_round_trip_keeps_ids_and_order() -> None:
    tasks = [Task(title="a"), Task(title="b", is_completed=True), Task(title="c")]
    assert parse_tasks(dump_tasks(tasks)) == tasks


def test_parse_rejects_duplicate_ids() -> None:
    record = '{"id": "e621e1f8-c36c-495a-93fc-0c247a3e6e5f", "title": "a", "isCompleted": false}'
    with pytest.raises(ValidationError, match="duplicate task id"):
        parse_tasks(f"[{record}, {record}]")
