from .api import TaskClient
from .board import TaskBoard
from .state import TaskListState

__all__ = ["TaskClient", "TaskBoard", "TaskListState"]
