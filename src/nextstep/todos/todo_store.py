# src/nextstep/todos/todo_store.py

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import replace

from ..core.ports import BlobStore, Clock
from .organizer import organize
from .todo_api import sample_todos
from .todo_codec import TodoDecodeError, decode_todos, encode_todos
from .todo_models import TodoCategory, TodoItem

logger = logging.getLogger(__name__)

DEFAULT_TODOS_KEY = "todos"


class TodoStore:
    """
    Authoritative in-memory todo list, persisted to one blob key.

    Persistence is best-effort and whole-collection:
    - every mutation overwrites the slot with the full list
    - a failed write is logged and dropped, the mutation stays applied
    - an unreadable slot loads as an empty list

    Derived views (incomplete/completed/by category) are recomputed on
    every access and returned as tuples.
    """

    def __init__(
        self,
        blob_store: BlobStore,
        *,
        key: str = DEFAULT_TODOS_KEY,
        clock: Clock = time.time,
        seed_samples: bool = True,
    ) -> None:
        self._blobs = blob_store
        self._key = key
        self._clock = clock
        self._seed_samples = seed_samples
        self._todos: list[TodoItem] = []
        self.is_organized = False

    # ---- persistence ----

    def load(self) -> int:
        """
        Replace the in-memory list with the persisted one.

        Seeds sample todos (and persists them) when nothing was loaded.
        Returns the number of todos held afterwards.
        """
        self._todos = self._read()

        if not self._todos and self._seed_samples:
            self._todos = sample_todos(self._clock())
            logger.info("TodoStore seeded %d sample todos key=%s", len(self._todos), self._key)
            self._save()

        logger.info("TodoStore loaded key=%s total=%d", self._key, len(self._todos))
        return len(self._todos)

    def _read(self) -> list[TodoItem]:
        try:
            payload = self._blobs.get(self._key)
        except Exception:
            logger.warning("TodoStore read failed key=%s; starting empty.", self._key, exc_info=True)
            return []

        if payload is None:
            logger.debug("TodoStore key=%s is empty", self._key)
            return []

        try:
            return decode_todos(payload)
        except TodoDecodeError as e:
            logger.warning("TodoStore could not decode key=%s (%s); starting empty.", self._key, e)
            return []

    def _save(self) -> None:
        try:
            self._blobs.set(self._key, encode_todos(self._todos))
        except Exception:
            logger.exception("TodoStore save failed key=%s; change kept in memory only.", self._key)

    def _index_of(self, todo_id: uuid.UUID) -> int | None:
        for i, t in enumerate(self._todos):
            if t.id == todo_id:
                return i
        return None

    # ---- mutations ----

    def add(self, todo: TodoItem) -> None:
        self._todos.append(todo)
        logger.debug("Todo added id=%s title=%s", todo.id, todo.title)
        self._save()

    def update(self, todo: TodoItem) -> bool:
        """Replace the todo with the same id in place. Unknown id is a no-op."""
        idx = self._index_of(todo.id)
        if idx is None:
            logger.debug("Todo update ignored, id=%s not found", todo.id)
            return False
        self._todos[idx] = todo
        logger.debug("Todo updated id=%s", todo.id)
        self._save()
        return True

    def delete(self, todo: TodoItem) -> int:
        """Remove every todo sharing this id; returns how many were removed."""
        before = len(self._todos)
        self._todos = [t for t in self._todos if t.id != todo.id]
        removed = before - len(self._todos)
        logger.debug("Todo deleted id=%s removed=%d", todo.id, removed)
        self._save()
        return removed

    def toggle_complete(self, todo: TodoItem) -> TodoItem | None:
        """Flip completion of the stored todo with this id; None if absent."""
        idx = self._index_of(todo.id)
        if idx is None:
            logger.debug("Todo toggle ignored, id=%s not found", todo.id)
            return None
        current = self._todos[idx]
        toggled = replace(current, is_completed=not current.is_completed)
        self._todos[idx] = toggled
        logger.debug("Todo toggled id=%s completed=%s", todo.id, toggled.is_completed)
        self._save()
        return toggled

    def organize(self) -> None:
        """Reorder the list itself; the previous order is not kept."""
        self._todos = organize(self._todos, now=self._clock())
        self.is_organized = True
        logger.info("TodoStore organized %d todos", len(self._todos))
        self._save()

    def unorganize(self) -> None:
        self.is_organized = False

    # ---- views ----

    @property
    def todos(self) -> tuple[TodoItem, ...]:
        return tuple(self._todos)

    @property
    def incomplete_todos(self) -> tuple[TodoItem, ...]:
        return tuple(t for t in self._todos if not t.is_completed)

    @property
    def completed_todos(self) -> tuple[TodoItem, ...]:
        return tuple(t for t in self._todos if t.is_completed)

    def todos_by_category(self, category: TodoCategory) -> tuple[TodoItem, ...]:
        return tuple(t for t in self._todos if t.category == category and not t.is_completed)

    def get(self, todo_id: uuid.UUID) -> TodoItem | None:
        idx = self._index_of(todo_id)
        return None if idx is None else self._todos[idx]

    def __len__(self) -> int:
        return len(self._todos)
