from .tasks import create_task, get_tasks, update_task_completion, delete_task

__all__ = ["create_task", "get_tasks", "update_task_completion", "delete_task"]
