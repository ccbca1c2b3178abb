class TaskServiceError(Exception):
    """Base class for errors raised by the task service."""


class TaskDecodeError(TaskServiceError):
    """The request body could not be read or decoded into a Task."""


class TaskNotFoundError(TaskServiceError):
    def __init__(self, task_id):
        super().__init__(NOT_FOUND_MESSAGE)
        self.task_id = task_id


NOT_FOUND_MESSAGE = "task with given id not found"
