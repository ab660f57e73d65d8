# src/nextstep/todos/todo_api.py

from __future__ import annotations

import time
import uuid
from collections.abc import Iterable

from .todo_models import RepeatCycle, TodoCategory, TodoItem, TodoPriority

DAY_SECONDS = 86400.0
HOUR_SECONDS = 3600.0


def create_todo(
    title: str,
    *,
    priority: TodoPriority = TodoPriority.MEDIUM,
    category: TodoCategory = TodoCategory.PERSONAL,
    hours: int = 0,
    minutes: int = 30,
    estimated_minutes: int | None = None,
    due_date: float | None = None,
    is_repeating: bool = False,
    selected_days: Iterable[int] = (),
    now: float | None = None,
) -> TodoItem:
    """
    Build a new todo from "add" form input.

    - title is trimmed; empty after trimming is rejected
    - effort is hours * 60 + minutes unless estimated_minutes is given
    - fresh id, not completed, created_at = now
    """
    clean_title = (title or "").strip()
    if not clean_title:
        raise ValueError("title is required")

    if estimated_minutes is None:
        if hours < 0 or minutes < 0:
            raise ValueError("hours and minutes must be >= 0")
        estimated_minutes = hours * 60 + minutes

    if now is None:
        now = time.time()

    return TodoItem(
        id=uuid.uuid4(),
        title=clean_title,
        priority=TodoPriority(priority),
        category=TodoCategory(category),
        estimated_minutes=estimated_minutes,
        due_date=due_date,
        repeat_cycle=RepeatCycle(is_repeating=is_repeating, selected_days=frozenset(selected_days)),
        is_completed=False,
        created_at=float(now),
    )


def sample_todos(now: float | None = None) -> list[TodoItem]:
    """Bootstrap set used when storage holds no todos yet."""
    if now is None:
        now = time.time()

    return [
        create_todo(
            "병원 예약하기",
            priority=TodoPriority.HIGH,
            category=TodoCategory.HEALTH,
            estimated_minutes=15,
            due_date=now + DAY_SECONDS,
            now=now,
        ),
        create_todo(
            "프로젝트 제안서 작성",
            priority=TodoPriority.URGENT,
            category=TodoCategory.WORK,
            estimated_minutes=120,
            due_date=now + 6 * HOUR_SECONDS,
            now=now,
        ),
        create_todo(
            "운동하기",
            priority=TodoPriority.MEDIUM,
            category=TodoCategory.HEALTH,
            estimated_minutes=30,
            is_repeating=True,
            selected_days=(1, 3, 5),
            now=now,
        ),
        create_todo(
            "책 읽기",
            priority=TodoPriority.LOW,
            category=TodoCategory.LEARNING,
            estimated_minutes=45,
            now=now,
        ),
        create_todo(
            "친구에게 연락하기",
            priority=TodoPriority.MEDIUM,
            category=TodoCategory.SOCIAL,
            estimated_minutes=20,
            now=now,
        ),
        create_todo(
            "청소하기",
            priority=TodoPriority.MEDIUM,
            category=TodoCategory.HOUSEHOLD,
            estimated_minutes=60,
            is_repeating=True,
            selected_days=(0, 6),
            now=now,
        ),
    ]
