import logging
import threading
from typing import Dict, Iterable, Optional

from .errors import TaskNotFoundError
from .models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """In-memory tasks keyed by id. Every access goes through one lock."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: Dict[str, Task] = {}
        self._lock = threading.Lock()
        for task in tasks or ():
            self._tasks[task.id] = task

    def list_all(self) -> Dict[str, Task]:
        with self._lock:
            return {task_id: self._tasks[task_id] for task_id in sorted(self._tasks)}

    def put(self, task: Task) -> None:
        # last write wins
        with self._lock:
            replaced = task.id in self._tasks
            self._tasks[task.id] = task
        logger.debug("%s task id=%r", "replaced" if replaced else "stored", task.id)

    def get(self, task_id: str) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def delete(self, task_id: str) -> None:
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]
        logger.debug("deleted task id=%r", task_id)

    def __len__(self):
        with self._lock:
            return len(self._tasks)

    def __contains__(self, task_id):
        with self._lock:
            return task_id in self._tasks


SEED_TASKS = (
    Task(
        id="1",
        description="Finish the final REST API assignment",
        note="If I get it done today, tomorrow is a free day. Hooray!",
        applications=("VS Code", "Terminal", "git"),
    ),
    Task(
        id="2",
        description="Test the final assignment with Postman",
        note="Better to do it while developing, every time the server is started and a handler is checked",
        applications=("VS Code", "Terminal", "git", "Postman"),
    ),
)


def seeded_store() -> TaskStore:
    return TaskStore(SEED_TASKS)
