# src/nextstep/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: every field has a working default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "NEXTSTEP"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    blob_db_path: Path

    # ---- Todo storage ----
    todos_key: str
    seed_samples: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "nextstep").strip() or "nextstep"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/nextstep"))
        blob_db_path = _env_path(_k("BLOB_DB_PATH"), data_dir / "nextstep.sqlite3")

        todos_key = _env(_k("TODOS_KEY"), "todos").strip() or "todos"
        seed_samples = _env_bool(_k("SEED_SAMPLES"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            blob_db_path=blob_db_path,
            todos_key=todos_key,
            seed_samples=seed_samples,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load .env once (never overriding real env vars) and build Settings."""
    load_dotenv(override=False)
    return Settings.from_env()
