from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo; they were written as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)

    title: str
    description: str | None = None
    completed: bool = False

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def touch(self) -> None:
        """Bump updated_at, always strictly past its previous value."""
        now = utcnow()
        if self.updated_at is not None:
            previous = as_utc(self.updated_at)
            if now <= previous:
                now = previous + timedelta(microseconds=1)
        self.updated_at = now
