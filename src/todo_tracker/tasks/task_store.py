# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStoreError(RuntimeError):
    """Writing the task file failed. The underlying OSError is the __cause__."""


def next_id(tasks: Iterable[Task]) -> int:
    """
    One plus the highest id present, or 1 for an empty collection.

    Recomputed from the data on every call: removing the highest task frees
    its id for the next add.
    """
    return max((t.id for t in tasks), default=0) + 1


def decode_tasks(raw: str) -> list[Task]:
    """Parse the file contents. Raises ValueError on anything malformed."""
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError(f"task file must hold a JSON array, got {type(data).__name__}")

    tasks = [Task.from_dict(item) for item in data]

    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise ValueError(f"duplicate task id {t.id}")
        seen.add(t.id)
    return tasks


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)


class TaskStore:
    """
    JSON-file task store.

    The whole collection is read on load() and rewritten on save(); there is
    no incremental update and no locking between processes (last writer wins).

    load() never fails: a missing, unreadable or malformed file reads as an
    empty collection. This also means a corrupted file is indistinguishable
    from a fresh start, and the next save() replaces it.
    """

    def __init__(self, path: str | Path = "todo.json", *, atomic_writes: bool = True) -> None:
        self._path = Path(path)
        self._atomic_writes = atomic_writes

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("Task file %s does not exist; starting empty.", self._path)
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.info("Task file %s unreadable (%s); treating as empty.", self._path, e)
            return []

        try:
            tasks = decode_tasks(raw)
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; absurdly deep nesting is a RecursionError.
            logger.info("Task file %s is malformed (%s); treating as empty.", self._path, e)
            return []

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        try:
            # Lone surrogates (undecodable argv bytes) cannot be stored as UTF-8.
            data = encode_tasks(tasks).encode("utf-8")
        except UnicodeEncodeError as e:
            raise TaskStoreError(f"task text is not valid UTF-8: {e.reason}") from e

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._atomic_writes:
                self._write_atomic(data)
            else:
                with open(self._path, "wb") as f:
                    f.write(data)
        except OSError as e:
            logger.debug("Saving %d tasks to %s failed.", len(tasks), self._path, exc_info=True)
            raise TaskStoreError(str(e)) from e

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

    def _write_atomic(self, data: bytes) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        replaced = False
        try:
            with open(tmp, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
            replaced = True
        finally:
            if not replaced:
                tmp.unlink(missing_ok=True)
