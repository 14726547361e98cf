"""Domain and auth exceptions raised below the HTTP layer."""
from typing import Any, Dict, Optional


class TaskManagementError(Exception):
    """Base exception carrying a machine-readable code."""
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TaskNotFoundError(TaskManagementError):
    """No task with the requested id is visible to the caller."""
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(
            code="NOT_FOUND",
            message=f"Task not found with id: {task_id}",
            details={"task_id": task_id},
        )


class UsernameTakenError(TaskManagementError):
    def __init__(self, username: str):
        super().__init__(
            code="USERNAME_TAKEN",
            message="Username already exists",
            details={"username": username},
        )


class InvalidCredentialsError(TaskManagementError):
    def __init__(self):
        super().__init__(code="INVALID_CREDENTIALS", message="Incorrect username or password")
