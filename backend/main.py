import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskapp.core.config import settings
from taskapp.core.database import engine, init_db
from taskapp.core.logging_setup import setup_logging
from taskapp.api import api_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Task App (FastAPI + SQLModel)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
def on_startup():
    setup_logging(settings.log_level)
    init_db()
    logger.info("Database ready at %s", engine.url)

@app.get("/")
def health():
    return {"message": "OK"}

app.include_router(api_router)
