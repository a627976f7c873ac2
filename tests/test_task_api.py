# tests/test_task_api.py

from __future__ import annotations

import pytest

from todo_tracker.tasks.task_api import TaskIdExhaustedError, add_task, list_tasks, remove_task
from todo_tracker.tasks.task_models import MAX_TASK_ID, Task
from todo_tracker.tasks.task_store import TaskStore, TaskStoreError

from .fakes import FailingTaskRepo, InMemoryTaskRepo


def test_sequential_adds_get_ids_one_to_n() -> None:
    repo = InMemoryTaskRepo()
    ids = [add_task(repo, f"task {i}").id for i in range(1, 6)]
    assert ids == [1, 2, 3, 4, 5]
    assert [t.id for t in list_tasks(repo)] == [1, 2, 3, 4, 5]


def test_add_strips_and_rejects_empty_description() -> None:
    repo = InMemoryTaskRepo()
    assert add_task(repo, "  walk the dog ").description == "walk the dog"

    with pytest.raises(ValueError):
        add_task(repo, "   ")
    assert repo.saves == 1


def test_remove_highest_then_add_reuses_id() -> None:
    repo = InMemoryTaskRepo([Task(1, "a"), Task(2, "b")])
    assert remove_task(repo, 2) is True
    assert add_task(repo, "c").id == 2


def test_remove_middle_does_not_renumber() -> None:
    repo = InMemoryTaskRepo([Task(1, "a"), Task(2, "b"), Task(3, "c")])
    assert remove_task(repo, 2) is True
    assert list_tasks(repo) == [Task(1, "a"), Task(3, "c")]
    assert add_task(repo, "d").id == 4


def test_remove_only_task_empties_collection() -> None:
    repo = InMemoryTaskRepo([Task(1, "only")])
    assert remove_task(repo, 1) is True
    assert list_tasks(repo) == []


def test_remove_missing_id_does_not_save() -> None:
    repo = InMemoryTaskRepo([Task(1, "a")])
    assert remove_task(repo, 9) is False
    assert repo.saves == 0
    assert list_tasks(repo) == [Task(1, "a")]


def test_add_failure_leaves_stored_collection_untouched() -> None:
    repo = FailingTaskRepo([Task(1, "a")])
    with pytest.raises(TaskStoreError):
        add_task(repo, "b")
    assert list_tasks(repo) == [Task(1, "a")]


def test_operations_against_real_store(store: TaskStore) -> None:
    add_task(store, "first")
    add_task(store, "second")
    remove_task(store, 1)
    add_task(store, "third")

    assert list_tasks(store) == [Task(2, "second"), Task(3, "third")]


def test_add_refuses_id_beyond_stored_range(store: TaskStore) -> None:
    store.save([Task(1, "keep"), Task(MAX_TASK_ID, "top")])
    before = store.path.read_bytes()

    with pytest.raises(TaskIdExhaustedError):
        add_task(store, "one more")

    assert store.path.read_bytes() == before
    assert store.load() == [Task(1, "keep"), Task(MAX_TASK_ID, "top")]


def test_add_below_max_id_still_works(store: TaskStore) -> None:
    store.save([Task(MAX_TASK_ID - 1, "almost")])
    assert add_task(store, "last").id == MAX_TASK_ID
    assert [t.id for t in store.load()] == [MAX_TASK_ID - 1, MAX_TASK_ID]
