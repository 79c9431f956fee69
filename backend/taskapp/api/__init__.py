from fastapi import APIRouter
from taskapp.api.routes import tasks_router

api_router = APIRouter()
api_router.include_router(tasks_router)
