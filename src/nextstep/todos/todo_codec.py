# todos/todo_codec.py

"""
Record (de)serialization for the persisted todo collection.

The slot holds one JSON array; each element uses the field names below.
Timestamps are epoch seconds, enums are stored by value.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Iterable
from typing import Any

from .todo_models import RepeatCycle, TodoCategory, TodoItem, TodoPriority


class TodoDecodeError(ValueError):
    """Raised when a persisted payload cannot be turned back into todos."""


def todo_to_record(todo: TodoItem) -> dict[str, Any]:
    return {
        "id": str(todo.id),
        "title": todo.title,
        "priority": todo.priority.value,
        "category": todo.category.value,
        "estimatedMinutes": int(todo.estimated_minutes),
        "dueDate": float(todo.due_date) if todo.due_date is not None else None,
        "repeatCycle": {
            "isRepeating": bool(todo.repeat_cycle.is_repeating),
            "selectedDays": sorted(todo.repeat_cycle.selected_days),
        },
        "isCompleted": bool(todo.is_completed),
        "createdAt": float(todo.created_at),
    }


def _require(record: dict[str, Any], key: str) -> Any:
    if key not in record:
        raise TodoDecodeError(f"record is missing {key!r}")
    return record[key]


def _number(value: Any, key: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TodoDecodeError(f"{key!r} must be a number, got {type(value).__name__}")
    return float(value)


def _flag(record: dict[str, Any], key: str) -> bool:
    value = _require(record, key)
    if not isinstance(value, bool):
        raise TodoDecodeError(f"{key!r} must be a boolean, got {type(value).__name__}")
    return value


def todo_from_record(record: Any) -> TodoItem:
    if not isinstance(record, dict):
        raise TodoDecodeError(f"record must be an object, got {type(record).__name__}")

    repeat = _require(record, "repeatCycle")
    if not isinstance(repeat, dict):
        raise TodoDecodeError("'repeatCycle' must be an object")
    days = _require(repeat, "selectedDays")
    if not isinstance(days, list):
        raise TodoDecodeError("'selectedDays' must be an array")
    if any(isinstance(d, bool) or not isinstance(d, int) for d in days):
        raise TodoDecodeError("'selectedDays' must hold integers")
    is_repeating = _flag(repeat, "isRepeating")

    minutes = _require(record, "estimatedMinutes")
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise TodoDecodeError("'estimatedMinutes' must be an integer")

    raw_due = _require(record, "dueDate")
    title = _require(record, "title")
    if not isinstance(title, str):
        raise TodoDecodeError("'title' must be a string")

    try:
        return TodoItem(
            id=uuid.UUID(str(_require(record, "id"))),
            title=title,
            priority=TodoPriority(_require(record, "priority")),
            category=TodoCategory(_require(record, "category")),
            estimated_minutes=minutes,
            due_date=None if raw_due is None else _number(raw_due, "dueDate"),
            repeat_cycle=RepeatCycle(
                is_repeating=is_repeating,
                selected_days=frozenset(days),
            ),
            is_completed=_flag(record, "isCompleted"),
            created_at=_number(_require(record, "createdAt"), "createdAt"),
        )
    except TodoDecodeError:
        raise
    except (TypeError, ValueError) as e:
        raise TodoDecodeError(str(e)) from e


def encode_todos(todos: Iterable[TodoItem]) -> bytes:
    records = [todo_to_record(t) for t in todos]
    return json.dumps(records, ensure_ascii=False).encode("utf-8")


def decode_todos(payload: bytes | str) -> list[TodoItem]:
    """
    Decode a whole collection.

    All-or-nothing: one bad record fails the payload.
    """
    try:
        data = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TodoDecodeError(f"payload is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise TodoDecodeError(f"payload must be an array, got {type(data).__name__}")
    return [todo_from_record(r) for r in data]
