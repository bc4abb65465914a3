import pytest
from fastapi.testclient import TestClient

from todo_backend.main import app
from todo_client.board import TaskBoard
from todo_client.client import TaskApiClient


@pytest.fixture
def api():
    """连接进程内真实服务的客户端"""
    with TestClient(app) as http:
        yield TaskApiClient(base_url="http://testserver/api/v1", http=http)


@pytest.fixture
def board(api):
    board = TaskBoard(api)
    board.load()
    return board
