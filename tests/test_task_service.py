"""Tests for TaskService."""

import pytest

from taskmanagement.exceptions import TaskNotFoundError
from taskmanagement.models.task import Task
from taskmanagement.services.task_service import TaskService

from .fakes import InMemoryTaskStore


@pytest.fixture
def store():
    return InMemoryTaskStore()


@pytest.fixture
def service(store):
    return TaskService(store)


def _create(service, title="Buy milk", description="2%", user_id="alice"):
    return service.create_task(Task(title=title, description=description, user_id=user_id))


class TestCreateTask:
    def test_assigns_id_and_timestamps(self, service):
        task = _create(service)
        assert task.id
        assert task.created_at <= task.updated_at
        assert task.completed is False

    def test_forwards_to_store(self, service, store):
        task = _create(service)
        assert len(store.saved) == 1
        assert store.tasks[task.id].title == "Buy milk"


class TestGetTask:
    def test_get_existing(self, service):
        task = _create(service)
        assert service.get_task_by_id(task.id) == task

    def test_get_missing_returns_none(self, service):
        assert service.get_task_by_id("missing") is None

    def test_get_all_is_unfiltered(self, service):
        _create(service, user_id="alice")
        _create(service, user_id="bob")
        owners = sorted(task.user_id for task in service.get_all_tasks())
        assert owners == ["alice", "bob"]


class TestUpdateTask:
    def test_update_preserves_id_and_created_at(self, service):
        task = _create(service)
        updated = service.update_task(task.copy(title="Buy oat milk"))
        assert updated.id == task.id
        assert updated.created_at == task.created_at
        assert updated.updated_at > task.updated_at
        assert updated.title == "Buy oat milk"

    def test_update_missing_raises(self, service, store):
        with pytest.raises(TaskNotFoundError) as exc_info:
            service.update_task(Task(id="missing", title="x", user_id="alice"))
        assert exc_info.value.task_id == "missing"
        assert "missing" in str(exc_info.value)
        assert store.saved == []

    def test_update_without_id_raises(self, service, store):
        with pytest.raises(TaskNotFoundError):
            service.update_task(Task(title="x", user_id="alice"))
        assert store.saved == []


class TestDeleteTask:
    def test_delete_existing(self, service, store):
        task = _create(service)
        service.delete_task(task.id)
        assert service.get_task_by_id(task.id) is None
        assert store.deleted == [task.id]

    def test_delete_missing_raises(self, service, store):
        _create(service)
        with pytest.raises(TaskNotFoundError):
            service.delete_task("missing")
        assert store.deleted == []
        assert len(store.tasks) == 1


class TestMarkTaskAsCompleted:
    def test_sets_completed_and_keeps_fields(self, service):
        task = _create(service)
        completed = service.mark_task_as_completed(task.id)
        assert completed.completed is True
        assert completed.title == task.title
        assert completed.description == task.description
        assert completed.user_id == task.user_id
        assert completed.created_at == task.created_at

    def test_completing_twice_stays_completed(self, service):
        task = _create(service)
        service.mark_task_as_completed(task.id)
        assert service.mark_task_as_completed(task.id).completed is True

    def test_complete_missing_raises(self, service, store):
        with pytest.raises(TaskNotFoundError):
            service.mark_task_as_completed("missing")
        assert store.saved == []
