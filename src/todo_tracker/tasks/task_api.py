# src/todo_tracker/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.ports import TaskRepo
from .task_models import MAX_TASK_ID, Task
from .task_store import next_id

logger = logging.getLogger(__name__)


class TaskIdExhaustedError(RuntimeError):
    """The next id would exceed MAX_TASK_ID, which no stored file may hold."""


def add_task(repo: TaskRepo, description: str) -> Task:
    """
    Append a task with the next free id and persist the collection.
    Raises ValueError for an empty description, TaskIdExhaustedError when the
    highest id is already MAX_TASK_ID, TaskStoreError if saving fails.
    """
    description = description.strip()
    if not description:
        raise ValueError("description is required")

    tasks = repo.load()
    new_id = next_id(tasks)
    if new_id > MAX_TASK_ID:
        raise TaskIdExhaustedError(f"Task id space exhausted (highest id is {MAX_TASK_ID}).")

    task = Task(id=new_id, description=description)
    tasks.append(task)
    repo.save(tasks)

    logger.debug("Task added id=%s", task.id)
    return task


def remove_task(repo: TaskRepo, task_id: int) -> bool:
    """
    Drop the task with this id. Saves only when something was removed.
    Returns True if a task was removed.
    """
    tasks = repo.load()
    kept = [t for t in tasks if t.id != task_id]
    if len(kept) == len(tasks):
        logger.debug("Task id=%s not found (total=%d)", task_id, len(tasks))
        return False

    repo.save(kept)
    logger.debug("Task removed id=%s", task_id)
    return True


def list_tasks(repo: TaskRepo) -> list[Task]:
    return repo.load()
