"""SQLModel-backed Task Store."""
from datetime import datetime, timedelta, timezone
from typing import List, Optional
import uuid

from sqlmodel import Session, select

from taskmanagement.models.task import Task, TaskRecord, as_utc
from taskmanagement.utils.logger import get_logger

logger = get_logger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_task_id() -> str:
    return uuid.uuid4().hex


class SqlTaskStore:
    """Task Store over a single SQLModel session.

    One instance lives for one request; per-row atomicity is left to the
    database and there is no retry here.
    """

    def __init__(self, session: Session):
        self.session = session

    def save(self, task: Task) -> Task:
        now = utcnow()
        record = self.session.get(TaskRecord, task.id) if task.id else None

        if record is None:
            # First persistence, either store-assigned or caller-chosen id
            record = TaskRecord.from_task(
                task.copy(
                    id=task.id or new_task_id(),
                    created_at=now,
                    updated_at=now,
                )
            )
            self.session.add(record)
        else:
            # Full replace of the mutable fields; id, owner and created_at stay
            record.title = task.title
            record.description = task.description
            record.completed = task.completed
            previous = as_utc(record.updated_at)
            if now <= previous:
                now = previous + timedelta(microseconds=1)
            record.updated_at = now

        self.session.commit()
        self.session.refresh(record)
        logger.debug("Task saved", task_id=record.id)
        return record.to_task()

    def find_by_id(self, task_id: str) -> Optional[Task]:
        record = self.session.get(TaskRecord, task_id)
        return record.to_task() if record else None

    def find_all(self) -> List[Task]:
        records = self.session.exec(select(TaskRecord)).all()
        return [record.to_task() for record in records]

    def delete_by_id(self, task_id: str) -> None:
        record = self.session.get(TaskRecord, task_id)
        if record is None:
            return
        self.session.delete(record)
        self.session.commit()
        logger.debug("Task deleted", task_id=task_id)
