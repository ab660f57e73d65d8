# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from nextstep.storage.blob_store import MemoryBlobStore
from nextstep.todos.todo_store import TodoStore

from .fakes import FakeClock

NOW = 1_760_000_000.0


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="nextstep-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        blob_db_path=tmp_path / "data" / "nextstep.sqlite3",
        todos_key="todos",
        seed_samples=True,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def blobs() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture()
def store(blobs: MemoryBlobStore, clock: FakeClock) -> TodoStore:
    """Empty, loaded store (no sample seeding)."""
    s = TodoStore(blobs, clock=clock, seed_samples=False)
    s.load()
    return s
