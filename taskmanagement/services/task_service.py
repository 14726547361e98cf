"""Task service: existence checks and completion rule on top of a Task Store."""
from typing import List, Optional

from taskmanagement.exceptions import TaskNotFoundError
from taskmanagement.models.task import Task
from taskmanagement.store.base import TaskStore
from taskmanagement.utils.logger import get_logger

logger = get_logger(__name__)


class TaskService:
    """Service class for task CRUD operations.

    Mutating operations only act on tasks that already exist; owner
    filtering is left to the API layer.
    """

    def __init__(self, store: TaskStore):
        self.store = store

    def create_task(self, task: Task) -> Task:
        """Persist a new task and return it with id and timestamps assigned."""
        created = self.store.save(task)
        logger.info("Task created", task_id=created.id, user_id=created.user_id)
        return created

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        """Get a task by ID, or None if it does not exist."""
        return self.store.find_by_id(task_id)

    def get_all_tasks(self) -> List[Task]:
        """Get every stored task, regardless of owner."""
        return self.store.find_all()

    def update_task(self, task: Task) -> Task:
        """Replace an existing task.

        Raises:
            TaskNotFoundError: If no task with ``task.id`` exists
        """
        self._require(task.id)
        updated = self.store.save(task)
        logger.info("Task updated", task_id=updated.id)
        return updated

    def delete_task(self, task_id: str) -> None:
        """Delete an existing task.

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        self._require(task_id)
        self.store.delete_by_id(task_id)
        logger.info("Task deleted", task_id=task_id)

    def mark_task_as_completed(self, task_id: str) -> Task:
        """Set ``completed`` on an existing task, keeping every other field.

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        task = self._require(task_id)
        task.completed = True
        completed = self.store.save(task)
        logger.info("Task completed", task_id=task_id)
        return completed

    def _require(self, task_id: Optional[str]) -> Task:
        task = self.store.find_by_id(task_id) if task_id else None
        if task is None:
            logger.info("Task not found", task_id=task_id)
            raise TaskNotFoundError(task_id)
        return task
