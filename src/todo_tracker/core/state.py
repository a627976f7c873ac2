# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings (or a test stand-in) for easy access from command handlers.
    settings: Any
    task_store: TaskRepo

    @property
    def prog(self) -> str:
        return str(getattr(self.settings, "app_name", "todo"))
