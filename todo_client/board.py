"""任务看板状态：加载状态、全局错误、任务列表与编辑草稿。

本地列表只在服务端返回后更新；任何请求失败都会写入唯一的全局错误，
之后看板停止响应操作，只能重启客户端恢复。
"""
import logging
from dataclasses import replace
from typing import Callable, List, Optional, TypeVar

from .client import TaskApiClient
from .exceptions import RequestFailure
from .models import Task

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskBoard:
    def __init__(self, client: TaskApiClient):
        self.client = client
        self.tasks: List[Task] = []
        self.loading: bool = True
        self.error: Optional[str] = None
        self.editing: Optional[Task] = None

    @property
    def halted(self) -> bool:
        return self.error is not None

    def find(self, task_id: int) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    # -------------------- server round trips --------------------
    def load(self) -> None:
        try:
            tasks = self._call(self.client.list_tasks)
            if tasks is not None:
                self.tasks = tasks
        finally:
            self.loading = False

    def add_task(self, title: str, description: str = "") -> Optional[Task]:
        created = self._call(lambda: self.client.create_task(title, description))
        if created is not None:
            self.tasks.append(created)
        return created

    def toggle_complete(self, task: Task) -> Optional[Task]:
        toggled = replace(task, completed=not task.completed)
        updated = self._call(lambda: self.client.update_task(toggled))
        if updated is not None:
            self._replace(task.id, updated)
        return updated

    def delete_task(self, task_id: int) -> bool:
        def _delete() -> bool:
            self.client.delete_task(task_id)
            return True

        deleted = self._call(_delete)
        if deleted:
            self.tasks = [t for t in self.tasks if t.id != task_id]
        return bool(deleted)

    # -------------------- in-place editing --------------------
    def start_edit(self, task: Task) -> None:
        if not self.halted:
            self.editing = replace(task)

    def change_edit(self, title: Optional[str] = None, description: Optional[str] = None) -> None:
        if self.editing is None:
            return
        if title is not None:
            self.editing.title = title
        if description is not None:
            self.editing.description = description

    def cancel_edit(self) -> None:
        self.editing = None

    def save_edit(self) -> Optional[Task]:
        if self.editing is None:
            return None
        draft = self.editing
        updated = self._call(lambda: self.client.update_task(draft))
        if updated is not None:
            self._replace(draft.id, updated)
            self.editing = None
        return updated

    # -------------------- helpers --------------------
    def _replace(self, task_id: int, updated: Task) -> None:
        self.tasks = [updated if t.id == task_id else t for t in self.tasks]

    def _call(self, action: Callable[[], T]) -> Optional[T]:
        if self.halted:
            return None
        try:
            return action()
        except RequestFailure as e:
            logger.error(f"操作失败: {e}")
            self.error = str(e) or "An error occurred"
            return None
