"""
Server-side implementations of the four task operations.

Each handler gets an open Session from the caller and commits its own work.
Persistence failures are logged and re-raised unchanged.
"""
import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select, delete

from taskapp.core.errors import TaskNotFoundError
from taskapp.models import Task
from taskapp.models.task import utcnow
from taskapp.schemas.task import TaskCreate, TaskUpdateCompletion, TaskDelete

logger = logging.getLogger(__name__)


def create_task(session: Session, data: TaskCreate) -> Task:
    now = utcnow()
    task = Task(
        title=data.title,
        description=data.description,
        completed=False,
        created_at=now,
        updated_at=now,
    )
    try:
        session.add(task)
        session.commit()
        session.refresh(task)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Task creation failed")
        raise

    logger.info("Created task %s", task.id)
    return task


def get_tasks(session: Session) -> List[Task]:
    try:
        return list(
            session.exec(
                select(Task).order_by(Task.created_at.desc(), Task.id.desc())
            ).all()
        )
    except SQLAlchemyError:
        logger.exception("Fetching tasks failed")
        raise


def update_task_completion(session: Session, data: TaskUpdateCompletion) -> Task:
    try:
        task = session.get(Task, data.id)
        if not task:
            raise TaskNotFoundError(data.id)

        task.completed = data.completed
        task.touch()
        session.add(task)
        session.commit()
        session.refresh(task)
    except TaskNotFoundError as e:
        logger.warning("Task completion update failed: %s", e)
        raise
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Task completion update failed")
        raise

    logger.info("Task %s marked completed=%s", task.id, task.completed)
    return task


def delete_task(session: Session, data: TaskDelete) -> None:
    # A missing id is not an error here, unlike update_task_completion
    try:
        result = session.exec(delete(Task).where(Task.id == data.id))
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Task deletion failed")
        raise

    if result.rowcount:
        logger.info("Deleted task %s", data.id)
    else:
        logger.debug("Delete for missing task %s ignored", data.id)
