from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from taskapp.core.database import get_session
from taskapp.core.errors import TaskNotFoundError
from taskapp import handlers
from taskapp.schemas.task import TaskCreate, TaskRead, TaskUpdateCompletion, TaskDelete

router = APIRouter(tags=["tasks"])

@router.post("/createTask", response_model=TaskRead)
def create_task(data: TaskCreate, session: Session = Depends(get_session)):
    return handlers.create_task(session, data)

@router.get("/getTasks", response_model=List[TaskRead])
def get_tasks(session: Session = Depends(get_session)):
    return handlers.get_tasks(session)

@router.post("/updateTaskCompletion", response_model=TaskRead)
def update_task_completion(data: TaskUpdateCompletion, session: Session = Depends(get_session)):
    try:
        return handlers.update_task_completion(session, data)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("/deleteTask")
def delete_task(data: TaskDelete, session: Session = Depends(get_session)):
    handlers.delete_task(session, data)
    return None
