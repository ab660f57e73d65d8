# todos/todo_models.py

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

WEEKDAY_NAMES: tuple[str, ...] = ("일", "월", "화", "수", "목", "금", "토")
# 0 = Sunday ... 6 = Saturday


class TodoPriority(StrEnum):
    """
    Task priority.

    Member order is not the sort order; see organizer.PRIORITY_ORDER.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def label(self) -> str:
        return _PRIORITY_LABELS[self]

    @property
    def color(self) -> str:
        return _PRIORITY_COLORS[self]


_PRIORITY_LABELS = {
    TodoPriority.LOW: "낮음",
    TodoPriority.MEDIUM: "보통",
    TodoPriority.HIGH: "높음",
    TodoPriority.URGENT: "긴급",
}

_PRIORITY_COLORS = {
    TodoPriority.LOW: "green",
    TodoPriority.MEDIUM: "blue",
    TodoPriority.HIGH: "orange",
    TodoPriority.URGENT: "red",
}


class TodoCategory(StrEnum):
    """Display grouping only; categories carry no ordering."""

    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    SOCIAL = "social"
    LEARNING = "learning"
    HOUSEHOLD = "household"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]


_CATEGORY_LABELS = {
    TodoCategory.WORK: "업무",
    TodoCategory.PERSONAL: "개인",
    TodoCategory.HEALTH: "건강",
    TodoCategory.SOCIAL: "사회",
    TodoCategory.LEARNING: "학습",
    TodoCategory.HOUSEHOLD: "가사",
}

_CATEGORY_ICONS = {
    TodoCategory.WORK: "briefcase.fill",
    TodoCategory.PERSONAL: "person.fill",
    TodoCategory.HEALTH: "heart.fill",
    TodoCategory.SOCIAL: "person.2.fill",
    TodoCategory.LEARNING: "book.fill",
    TodoCategory.HOUSEHOLD: "house.fill",
}


@dataclass(frozen=True, slots=True)
class RepeatCycle:
    """
    Weekly repeat metadata.

    Purely descriptive: nothing expands it into future occurrences.
    selected_days is kept even when is_repeating is False.
    """

    is_repeating: bool = False
    selected_days: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        days = frozenset(self.selected_days)
        # bool is an int subclass; True must not pass as Monday
        if any(isinstance(d, bool) or not isinstance(d, int) for d in days):
            raise ValueError(f"selected_days must hold integers, got {sorted(map(repr, days))}")
        bad = sorted(d for d in days if d < 0 or d > 6)
        if bad:
            raise ValueError(f"selected_days must be within 0..6, got {bad}")
        object.__setattr__(self, "selected_days", days)

    @property
    def day_names(self) -> list[str]:
        return [WEEKDAY_NAMES[d] for d in sorted(self.selected_days)]


@dataclass(frozen=True, slots=True)
class TodoItem:
    title: str
    priority: TodoPriority = TodoPriority.MEDIUM
    category: TodoCategory = TodoCategory.PERSONAL
    estimated_minutes: int = 30
    due_date: float | None = None
    repeat_cycle: RepeatCycle = field(default_factory=RepeatCycle)
    is_completed: bool = False
    created_at: float = field(default_factory=time.time)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if isinstance(self.estimated_minutes, bool) or not isinstance(self.estimated_minutes, int):
            raise ValueError(f"estimated_minutes must be an integer, got {self.estimated_minutes!r}")
        if self.estimated_minutes < 0:
            raise ValueError(f"estimated_minutes must be >= 0, got {self.estimated_minutes}")

    @property
    def estimated_time_string(self) -> str:
        if self.estimated_minutes < 60:
            return f"{self.estimated_minutes}분"
        hours, minutes = divmod(self.estimated_minutes, 60)
        if minutes == 0:
            return f"{hours}시간"
        return f"{hours}시간 {minutes}분"

    @property
    def due_date_string(self) -> str | None:
        """Local-time due date as "MM/dd (요일) HH:mm", or None."""
        if self.due_date is None:
            return None
        dt = datetime.fromtimestamp(self.due_date)
        # isoweekday(): Monday=1 .. Sunday=7
        weekday = WEEKDAY_NAMES[dt.isoweekday() % 7]
        return f"{dt:%m/%d} ({weekday}) {dt:%H:%M}"
