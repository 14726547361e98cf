# tests/fakes.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from taskmanagement.models.task import Task


class InMemoryTaskStore:
    """
    Dict-backed TaskStore used for service and API unit tests.

    - Honors the store contract (id assignment, created_at once, updated_at always)
    - Records save/delete calls for assertions
    - Hands out copies so callers never alias stored objects
    """

    def __init__(self, start: datetime | None = None) -> None:
        self.tasks: dict[str, Task] = {}
        self.saved: list[Task] = []
        self.deleted: list[str] = []
        self._next_id = 1
        self._clock = start or datetime(2026, 1, 1, 9, 0, 0, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def save(self, task: Task) -> Task:
        self.saved.append(task.copy())
        now = self._tick()
        existing = self.tasks.get(task.id) if task.id else None
        if existing is None:
            task_id = task.id or f"task-{self._next_id}"
            self._next_id += 1
            stored = task.copy(id=task_id, created_at=now, updated_at=now)
        else:
            stored = existing.copy(
                title=task.title,
                description=task.description,
                completed=task.completed,
                updated_at=now,
            )
        self.tasks[stored.id] = stored
        return stored.copy()

    def find_by_id(self, task_id: str) -> Task | None:
        task = self.tasks.get(task_id)
        return task.copy() if task else None

    def find_all(self) -> list[Task]:
        return [task.copy() for task in self.tasks.values()]

    def delete_by_id(self, task_id: str) -> None:
        self.deleted.append(task_id)
        self.tasks.pop(task_id, None)
