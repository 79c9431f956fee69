"""
Client-side task list.

`TaskListState` is immutable. Every server response is folded in through one
of the reducers below, which return a new state and never touch the old one.
"""
from dataclasses import dataclass, replace
from typing import Dict, Iterable, Tuple

from taskapp.schemas.task import TaskRead


@dataclass(frozen=True)
class TaskListState:
    tasks: Tuple[TaskRead, ...] = ()

    @property
    def pending(self) -> Tuple[TaskRead, ...]:
        return tuple(t for t in self.tasks if not t.completed)

    @property
    def completed(self) -> Tuple[TaskRead, ...]:
        return tuple(t for t in self.tasks if t.completed)

    @property
    def total(self) -> int:
        return len(self.tasks)

    def summary(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "pending": len(self.pending),
            "completed": len(self.completed),
        }


def tasks_loaded(state: TaskListState, tasks: Iterable[TaskRead]) -> TaskListState:
    return replace(state, tasks=tuple(tasks))


def task_created(state: TaskListState, task: TaskRead) -> TaskListState:
    return replace(state, tasks=state.tasks + (task,))


def task_updated(state: TaskListState, task: TaskRead) -> TaskListState:
    return replace(
        state, tasks=tuple(task if t.id == task.id else t for t in state.tasks)
    )


def task_deleted(state: TaskListState, task_id: int) -> TaskListState:
    return replace(state, tasks=tuple(t for t in state.tasks if t.id != task_id))
