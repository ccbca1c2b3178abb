import threading

import pytest

from tasksvc.errors import NOT_FOUND_MESSAGE, TaskNotFoundError
from tasksvc.models import Task
from tasksvc.store import SEED_TASKS, TaskStore, seeded_store


def test_put_get_delete():
    store = TaskStore()
    task = Task(id="1", description="d", note="n", applications=("git",))

    store.put(task)
    assert store.get("1") == task
    assert "1" in store

    store.delete("1")
    assert "1" not in store
    with pytest.raises(TaskNotFoundError):
        store.get("1")


def test_missing_task_error_carries_id_and_message():
    store = TaskStore()
    with pytest.raises(TaskNotFoundError) as excinfo:
        store.delete("42")
    assert excinfo.value.task_id == "42"
    assert str(excinfo.value) == NOT_FOUND_MESSAGE


def test_put_replaces_existing():
    store = TaskStore([Task(id="1", note="old")])
    store.put(Task(id="1", note="new"))
    assert len(store) == 1
    assert store.get("1").note == "new"


def test_list_all_is_sorted_snapshot():
    store = TaskStore([Task(id="b"), Task(id="a")])
    snapshot = store.list_all()
    assert list(snapshot) == ["a", "b"]

    store.put(Task(id="c"))
    assert "c" not in snapshot


def test_seeded_store_has_sample_tasks():
    store = seeded_store()
    assert list(store.list_all()) == ["1", "2"]
    assert store.get("1") == SEED_TASKS[0]


def test_concurrent_writers():
    store = TaskStore()

    def write(prefix):
        for i in range(200):
            store.put(Task(id=f"{prefix}-{i}"))

    threads = [threading.Thread(target=write, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 8 * 200
