# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Ids are stored as unsigned 32-bit values in existing todo.json files.
MAX_TASK_ID = 2**32 - 1


@dataclass(slots=True)
class Task:
    id: int
    description: str

    def to_dict(self) -> dict[str, Any]:
        # Field order is part of the on-disk format.
        return {"id": self.id, "description": self.description}

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """
        Strict decode of one stored record.

        Raises ValueError for anything that is not an object with an integer
        `id` in 1..MAX_TASK_ID and a string `description`. Extra keys are ignored.
        """
        if not isinstance(data, dict):
            raise ValueError(f"task record must be an object, got {type(data).__name__}")

        raw_id = data.get("id")
        # bool is an int subclass; JSON true/false is not a valid id.
        if not isinstance(raw_id, int) or isinstance(raw_id, bool):
            raise ValueError(f"task id must be an integer, got {raw_id!r}")
        if not 1 <= raw_id <= MAX_TASK_ID:
            raise ValueError(f"task id out of range: {raw_id}")

        description = data.get("description")
        if not isinstance(description, str):
            raise ValueError(f"task {raw_id} description must be a string")

        return cls(id=raw_id, description=description)
