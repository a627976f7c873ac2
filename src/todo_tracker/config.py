# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per invocation.
- Every variable optional: with nothing set the tool keeps `todo.json` in the
  current directory and prints nothing but command output.

Variables:
- TODO_APP_NAME       program name shown in usage text (default: todo)
- TODO_TASKS_PATH     storage file (default: todo.json)
- TODO_ATOMIC_WRITES  write via temp file + rename (default: true)
- TODO_LOG_LEVEL      console log level (default: WARNING)
- TODO_LOG_DIR        if set, also log everything to <dir>/todo.log
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_APP_NAME = "todo"
DEFAULT_TASKS_PATH = Path("todo.json")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Storage ----
    tasks_path: Path
    atomic_writes: bool

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            # .env is looked up from the working directory upwards.
            # Real environment variables always win over .env values.
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), DEFAULT_APP_NAME)
        log_level = _env(_k("LOG_LEVEL"), "WARNING").upper()
        log_dir = _env_path(_k("LOG_DIR"), None)

        tasks_path = _env_path(_k("TASKS_PATH"), DEFAULT_TASKS_PATH) or DEFAULT_TASKS_PATH
        atomic_writes = _env_bool(_k("ATOMIC_WRITES"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            tasks_path=tasks_path,
            atomic_writes=atomic_writes,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
