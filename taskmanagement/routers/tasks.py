"""Task router."""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from sqlmodel import Session

from taskmanagement.api.tasks import TaskAPI
from taskmanagement.db.config import get_session
from taskmanagement.exceptions import TaskNotFoundError
from taskmanagement.middleware.auth import get_current_user, CurrentUser
from taskmanagement.schemas.task import TaskCreate, TaskResponse
from taskmanagement.services.task_service import TaskService
from taskmanagement.store.sql import SqlTaskStore

router = APIRouter(tags=["Tasks"])  # No prefix since main.py adds /tasks


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Dependency for getting TaskService instance."""
    return TaskService(SqlTaskStore(session))


def get_task_api(service: TaskService = Depends(get_task_service)) -> TaskAPI:
    """Dependency for the owner-scoped Task API."""
    return TaskAPI(service)


def _not_found(error: TaskNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    api: TaskAPI = Depends(get_task_api),
):
    """Create a task owned by the authenticated user."""
    return api.create(current_user.user_id, task_data)


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    api: TaskAPI = Depends(get_task_api),
):
    """List the authenticated user's tasks."""
    return api.list(current_user.user_id)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    api: TaskAPI = Depends(get_task_api),
):
    """Get a specific task by ID."""
    try:
        return api.get(current_user.user_id, task_id)
    except TaskNotFoundError as e:
        raise _not_found(e)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    task_data: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    api: TaskAPI = Depends(get_task_api),
):
    """Replace a task's title and description."""
    try:
        return api.update(current_user.user_id, task_id, task_data)
    except TaskNotFoundError as e:
        raise _not_found(e)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    api: TaskAPI = Depends(get_task_api),
):
    """Delete a task."""
    try:
        api.delete(current_user.user_id, task_id)
    except TaskNotFoundError as e:
        raise _not_found(e)


@router.patch("/{task_id}/complete", response_model=TaskResponse)
async def complete_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    api: TaskAPI = Depends(get_task_api),
):
    """Mark a task as completed. There is no way back to pending."""
    try:
        return api.complete(current_user.user_id, task_id)
    except TaskNotFoundError as e:
        raise _not_found(e)
