"""Todo 终端客户端 - 通过 HTTP 调用任务服务并渲染任务列表"""

from .client import TaskApiClient, API_BASE_URL
from .board import TaskBoard
from .exceptions import RequestFailure
from .models import Task

__all__ = ["TaskApiClient", "API_BASE_URL", "TaskBoard", "RequestFailure", "Task"]
