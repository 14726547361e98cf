"""
Task API: the boundary between HTTP routers and the task service.

Every call takes the caller identity explicitly. With ``owner_scoped`` on
(the default, and what the routers use) a caller only ever sees or changes
their own tasks, and another user's task is reported as not found so its
existence is not leaked. ``owner_scoped=False`` drops the filtering and is
only meant for fully trusted internal callers.
"""

from typing import List

from taskmanagement.exceptions import TaskNotFoundError
from taskmanagement.models.task import Task
from taskmanagement.schemas.task import TaskCreate, TaskResponse
from taskmanagement.services.task_service import TaskService
from taskmanagement.utils.logger import get_logger

logger = get_logger(__name__)


def to_response(task: Task) -> TaskResponse:
    """Map a domain task to its wire representation."""
    return TaskResponse.model_validate(task)


class TaskAPI:
    """Owner-filtering facade over TaskService."""

    def __init__(self, service: TaskService, owner_scoped: bool = True):
        self.service = service
        self.owner_scoped = owner_scoped

    def create(self, user_id: str, payload: TaskCreate) -> TaskResponse:
        task = Task(
            title=payload.title,
            description=payload.description,
            completed=False,
            user_id=user_id,
        )
        return to_response(self.service.create_task(task))

    def get(self, user_id: str, task_id: str) -> TaskResponse:
        return to_response(self._lookup(user_id, task_id))

    def list(self, user_id: str) -> List[TaskResponse]:
        return [
            to_response(task)
            for task in self.service.get_all_tasks()
            if self._visible_to(task, user_id)
        ]

    def update(self, user_id: str, task_id: str, payload: TaskCreate) -> TaskResponse:
        existing = self._lookup(user_id, task_id)
        task = existing.copy(
            title=payload.title,
            description=payload.description,
            user_id=user_id,
        )
        return to_response(self.service.update_task(task))

    def delete(self, user_id: str, task_id: str) -> None:
        self._lookup(user_id, task_id)
        self.service.delete_task(task_id)

    def complete(self, user_id: str, task_id: str) -> TaskResponse:
        self._lookup(user_id, task_id)
        return to_response(self.service.mark_task_as_completed(task_id))

    def _visible_to(self, task: Task, user_id: str) -> bool:
        return not self.owner_scoped or task.user_id == user_id

    def _lookup(self, user_id: str, task_id: str) -> Task:
        task = self.service.get_task_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        if not self._visible_to(task, user_id):
            logger.warning("Ownership check failed", task_id=task_id, user_id=user_id)
            raise TaskNotFoundError(task_id)
        return task
