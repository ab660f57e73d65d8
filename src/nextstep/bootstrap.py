# src/nextstep/bootstrap.py

"""
Composition root.

- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite blob store into a TodoStore and loads it.
"""

from __future__ import annotations

import logging

from .config import get_settings
from .core.state import AppState
from .logging_setup import level_from_name, setup_logging
from .storage.blob_store import SqliteBlobStore
from .todos.todo_store import TodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.blob_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TodoStore(
        SqliteBlobStore(settings.blob_db_path),
        key=settings.todos_key,
        seed_samples=settings.seed_samples,
    )
    store.load()
    return AppState(settings=settings, todo_store=store)


def start(*, settings=None) -> AppState:
    """Configure logging from settings, then build the state."""
    if settings is None:
        settings = get_settings()

    setup_logging(log_dir=settings.data_dir, console_level=level_from_name(settings.log_level))
    logger.info("Starting %s...", settings.app_name)
    return create_initial_state(settings=settings)
