# todos/organizer.py

"""
Organizer: the "organized view" ordering.

Criteria, evaluated in order until one discriminates:
1. incomplete before completed
2. if both have due dates: a task due within 24h beats one that is not
3. ...otherwise the sooner due date wins
4. a task with a due date beats one without
5. priority rank (urgent, high, medium, low)
6. shorter estimated effort
7. earlier creation time
"""

from __future__ import annotations

import functools
import time
from collections.abc import Iterable
from typing import Any

from .todo_models import TodoItem, TodoPriority

URGENCY_BAND_SECONDS = 86400.0

PRIORITY_ORDER: tuple[TodoPriority, ...] = (
    TodoPriority.URGENT,
    TodoPriority.HIGH,
    TodoPriority.MEDIUM,
    TodoPriority.LOW,
)


def priority_rank(priority: Any) -> int:
    """Rank of a priority; anything unknown sorts after LOW."""
    try:
        return PRIORITY_ORDER.index(priority)
    except ValueError:
        return len(PRIORITY_ORDER)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_todos(a: TodoItem, b: TodoItem, *, now: float) -> int:
    """Three-way comparison; negative means a sorts first."""
    if a.is_completed != b.is_completed:
        return 1 if a.is_completed else -1

    if a.due_date is not None and b.due_date is not None:
        until_a = a.due_date - now
        until_b = b.due_date - now

        in_band_a = until_a < URGENCY_BAND_SECONDS
        in_band_b = until_b < URGENCY_BAND_SECONDS
        if in_band_a and not in_band_b:
            return -1
        if in_band_b and not in_band_a:
            return 1

        if until_a != until_b:
            return _cmp(until_a, until_b)
    elif a.due_date is not None:
        return -1
    elif b.due_date is not None:
        return 1

    rank_a = priority_rank(a.priority)
    rank_b = priority_rank(b.priority)
    if rank_a != rank_b:
        return _cmp(rank_a, rank_b)

    if a.estimated_minutes != b.estimated_minutes:
        return _cmp(a.estimated_minutes, b.estimated_minutes)

    return _cmp(a.created_at, b.created_at)


def organize(todos: Iterable[TodoItem], *, now: float | None = None) -> list[TodoItem]:
    """
    Return todos in organized order.

    The sort is stable, so todos equal under every criterion keep their
    input order. `now` is sampled once for the whole sort.
    """
    if now is None:
        now = time.time()
    key = functools.cmp_to_key(functools.partial(compare_todos, now=now))
    return sorted(todos, key=key)
