import logging
from typing import Any, List, Optional

import httpx

from .exceptions import RequestFailure
from .models import Task

logger = logging.getLogger(__name__)

API_BASE_URL = "http://localhost:8787/api/v1"


class TaskApiClient:
    """任务服务 HTTP 客户端，任何失败统一抛出 RequestFailure"""

    def __init__(self, base_url: str = API_BASE_URL, http: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self._http = http or httpx.Client(timeout=10.0)

    def list_tasks(self) -> List[Task]:
        failure = "Failed to fetch tasks"
        data = self._request("GET", "/tasks", failure=failure)
        if not isinstance(data, list):
            raise RequestFailure(failure)
        return [self._to_task(item, failure) for item in data]

    def get_task(self, task_id: int) -> Task:
        failure = "Failed to fetch task"
        data = self._request("GET", f"/tasks/{task_id}", failure=failure)
        return self._to_task(data, failure)

    def create_task(self, title: str, description: str = "") -> Task:
        failure = "Failed to add task"
        payload = {"title": title, "description": description, "completed": False}
        data = self._request("POST", "/tasks", json=payload, failure=failure)
        return self._to_task(data, failure)

    def update_task(self, task: Task) -> Task:
        failure = "Failed to update task"
        data = self._request("PUT", f"/tasks/{task.id}", json=task.to_dict(), failure=failure)
        return self._to_task(data, failure)

    def delete_task(self, task_id: int) -> None:
        self._request("DELETE", f"/tasks/{task_id}", failure="Failed to delete task")

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, failure: str, json: Optional[dict] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self._http.request(method, url, json=json)
        except httpx.HTTPError as e:
            logger.warning(f"请求失败: {method} {url}, 错误: {e}")
            raise RequestFailure(failure) from e

        if not response.is_success:
            logger.warning(f"请求失败: {method} {url}, 状态码: {response.status_code}")
            raise RequestFailure(failure)

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"响应不是有效的 JSON: {method} {url}")
            raise RequestFailure(failure) from e

    @staticmethod
    def _to_task(data: Any, failure: str) -> Task:
        try:
            return Task.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"响应缺少任务字段: {data!r}")
            raise RequestFailure(failure) from e
