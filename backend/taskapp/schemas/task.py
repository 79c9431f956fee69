from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskapp.models.task import as_utc


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    completed: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def _utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    # None means "no description"; "" is kept as an empty description
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return value


class TaskUpdateCompletion(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int
    completed: bool


class TaskDelete(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int
