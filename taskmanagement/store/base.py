"""
Task Store contract.

The service layer depends only on this protocol, so any backend that can
upsert, look up, list and delete tasks by an opaque string id will do.
"""

from typing import List, Optional, Protocol, runtime_checkable

from taskmanagement.models.task import Task


@runtime_checkable
class TaskStore(Protocol):
    """Persistence port for Task records."""

    def save(self, task: Task) -> Task:
        """Insert or replace a task and return the persisted copy.

        A task without an id gets a fresh one and its ``created_at`` stamped.
        ``updated_at`` is refreshed on every call.
        """

    def find_by_id(self, task_id: str) -> Optional[Task]:
        """Return the task or None when missing."""

    def find_all(self) -> List[Task]:
        """Return every stored task in store-native order."""

    def delete_by_id(self, task_id: str) -> None:
        """Delete the task if present. Missing ids are ignored."""
