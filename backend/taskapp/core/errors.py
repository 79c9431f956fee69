class TaskError(Exception):
    """Base class for task operation failures."""


class InvalidTaskInput(TaskError, ValueError):
    pass


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} not found")


class TransportError(TaskError):
    """The remote call failed before a usable response came back."""
