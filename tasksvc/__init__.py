from .models import Task
from .store import TaskStore
from .todo import create_app

__all__ = ["Task", "TaskStore", "create_app"]
