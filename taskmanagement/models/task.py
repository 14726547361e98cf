"""Task models: the domain object and its SQLModel table mapping."""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to timestamps read back without an offset."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class Task:
    """A user-owned unit of work.

    ``id`` stays ``None`` until the store persists the task for the first time.
    """

    title: str
    description: Optional[str] = None
    completed: bool = False
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user_id: Optional[str] = None

    def copy(self, **changes) -> "Task":
        return replace(self, **changes)


class TaskRecord(SQLModel, table=True):
    """Row representation of a Task."""

    __tablename__ = "tasks"

    id: str = Field(primary_key=True, max_length=32)
    user_id: str = Field(index=True, max_length=50)
    title: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    completed: bool = Field(default=False)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> "TaskRecord":
        return cls(
            id=task.id,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            completed=self.completed,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
            user_id=self.user_id,
        )
