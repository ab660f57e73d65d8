# src/nextstep/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..todos.todo_store import TodoStore


@dataclass(slots=True)
class AppState:
    """
    Application state passed to presentation code.

    settings is kept as Any so tests can pass a lightweight namespace.
    """

    settings: Any
    todo_store: TodoStore
