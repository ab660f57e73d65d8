# tests/test_bootstrap.py

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from nextstep import bootstrap
from nextstep.bootstrap import create_initial_state
from nextstep.todos.todo_api import create_todo


def test_initial_state_seeds_and_persists(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)

    assert settings.blob_db_path.exists()
    assert len(state.todo_store) == 6
    assert state.todo_store.is_organized is False


def test_initial_state_reloads_existing_todos(settings: SimpleNamespace) -> None:
    first = create_initial_state(settings=settings)
    extra = create_todo("from last session")
    first.todo_store.add(extra)

    second = create_initial_state(settings=settings)

    assert len(second.todo_store) == 7
    assert second.todo_store.get(extra.id) == extra


def test_initial_state_without_seeding(settings: SimpleNamespace) -> None:
    settings.seed_samples = False

    state = create_initial_state(settings=settings)

    assert len(state.todo_store) == 0


def test_start_configures_logging_then_loads(settings: SimpleNamespace, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(bootstrap, "setup_logging", lambda **kw: calls.append(kw))

    state = bootstrap.start(settings=settings)

    assert calls == [{"log_dir": settings.data_dir, "console_level": logging.DEBUG}]
    assert len(state.todo_store) == 6
