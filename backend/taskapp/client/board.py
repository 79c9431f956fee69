import logging
from typing import Optional

from taskapp.core.errors import TaskError
from taskapp.client.api import TaskClient
from taskapp.client.state import (
    TaskListState,
    task_created,
    task_deleted,
    task_updated,
    tasks_loaded,
)

logger = logging.getLogger(__name__)


class TaskBoard:
    """
    Drives the remote operations from user actions.

    State is passed in and handed back. A failed call is logged and the
    incoming state is returned as-is.
    """

    def __init__(self, client: TaskClient) -> None:
        self.client = client

    def load(self, state: TaskListState) -> TaskListState:
        try:
            tasks = self.client.get_tasks()
        except TaskError:
            logger.exception("Failed to load tasks")
            return state
        return tasks_loaded(state, tasks)

    def add(
        self, state: TaskListState, title: str, description: Optional[str] = None
    ) -> TaskListState:
        if not title.strip():
            return state
        try:
            task = self.client.create_task(title, description or None)
        except TaskError:
            logger.exception("Failed to create task")
            return state
        return task_created(state, task)

    def toggle(self, state: TaskListState, task_id: int) -> TaskListState:
        current = next((t for t in state.tasks if t.id == task_id), None)
        if current is None:
            logger.warning("Toggle for unknown task %s ignored", task_id)
            return state
        try:
            task = self.client.update_task_completion(task_id, not current.completed)
        except TaskError:
            logger.exception("Failed to update task %s", task_id)
            return state
        return task_updated(state, task)

    def remove(self, state: TaskListState, task_id: int) -> TaskListState:
        try:
            self.client.delete_task(task_id)
        except TaskError:
            logger.exception("Failed to delete task %s", task_id)
            return state
        return task_deleted(state, task_id)
