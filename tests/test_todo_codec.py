# tests/test_todo_codec.py

from __future__ import annotations

import json
import uuid

import pytest

from nextstep.todos.todo_api import create_todo
from nextstep.todos.todo_codec import TodoDecodeError, decode_todos, encode_todos, todo_to_record
from nextstep.todos.todo_models import TodoCategory, TodoPriority

NOW = 1_760_000_000.0


def test_record_layout() -> None:
    t = create_todo(
        "gym",
        priority=TodoPriority.HIGH,
        category=TodoCategory.HEALTH,
        estimated_minutes=40,
        due_date=NOW + 10,
        is_repeating=True,
        selected_days=[5, 1],
        now=NOW,
    )

    assert todo_to_record(t) == {
        "id": str(t.id),
        "title": "gym",
        "priority": "high",
        "category": "health",
        "estimatedMinutes": 40,
        "dueDate": NOW + 10,
        "repeatCycle": {"isRepeating": True, "selectedDays": [1, 5]},
        "isCompleted": False,
        "createdAt": NOW,
    }


def test_encode_decode_preserves_order_and_fields() -> None:
    todos = [create_todo("b", now=NOW), create_todo("a", due_date=NOW + 1, now=NOW + 1)]

    payload = encode_todos(todos)

    assert json.loads(payload)[1]["dueDate"] == NOW + 1
    assert json.loads(payload)[0]["dueDate"] is None
    assert decode_todos(payload) == todos


def test_non_ascii_titles_survive() -> None:
    todos = [create_todo("청소하기", now=NOW)]
    payload = encode_todos(todos)

    assert "청소하기".encode("utf-8") in payload
    assert decode_todos(payload)[0].title == "청소하기"


@pytest.mark.parametrize(
    "payload",
    [
        b"",
        b"not json",
        b"{}",
        b'[{"title": "x"}]',
        b"\xff\xfe",
    ],
)
def test_malformed_payloads_raise(payload: bytes) -> None:
    with pytest.raises(TodoDecodeError):
        decode_todos(payload)


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("id", "not-a-uuid"),
        ("priority", "someday"),
        ("category", "hobby"),
        ("estimatedMinutes", -5),
        ("estimatedMinutes", "30"),
        ("dueDate", "tomorrow"),
        ("createdAt", True),
        ("title", None),
        ("repeatCycle", {"isRepeating": True, "selectedDays": [9]}),
        ("repeatCycle", {"isRepeating": True}),
        ("repeatCycle", {"isRepeating": "false", "selectedDays": []}),
        ("repeatCycle", {"isRepeating": 0, "selectedDays": []}),
        ("repeatCycle", {"isRepeating": True, "selectedDays": [True]}),
        ("repeatCycle", {"isRepeating": True, "selectedDays": [2.5]}),
        ("repeatCycle", {"isRepeating": True, "selectedDays": ["1"]}),
        ("isCompleted", "false"),
        ("isCompleted", 1),
        ("isCompleted", None),
    ],
)
def test_invalid_field_values_raise(field: str, value) -> None:
    record = todo_to_record(create_todo("x", now=NOW))
    record[field] = value

    with pytest.raises(TodoDecodeError):
        decode_todos(json.dumps([record]))


def test_decode_restores_uuid() -> None:
    t = create_todo("x", now=NOW)
    restored = decode_todos(encode_todos([t]))[0]

    assert isinstance(restored.id, uuid.UUID)
    assert restored.id == t.id
