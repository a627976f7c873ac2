# src/todo_tracker/core/ports.py

"""
Ports (interfaces) used by the task operations.

task_api depends on this Protocol instead of TaskStore directly, so tests can
swap in an in-memory or failing repo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection persistence: read everything, write everything."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: list[Task]) -> None: ...
