import pytest
from fastapi.testclient import TestClient

from todo_backend.main import app
from todo_backend.services.task_service import TaskService
from todo_backend.storage.task_store import TaskStore


@pytest.fixture
def store():
    """带初始任务的存储"""
    return TaskStore.seeded()


@pytest.fixture
def service(store):
    return TaskService(store)


@pytest.fixture
def client():
    """每个测试都重新触发 lifespan，存储恢复为初始任务"""
    with TestClient(app) as test_client:
        yield test_client
