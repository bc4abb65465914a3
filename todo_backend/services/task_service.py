import logging
from ..exceptions import TaskNotFoundError
from ..models.task import Task, TaskCreate, TaskUpdate
from ..storage.task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self) -> list[Task]:
        """按插入顺序返回全部任务"""
        return self.store.list_all()

    def get_task(self, task_id: int) -> Task:
        """查询单个任务，不存在时抛出 TaskNotFoundError"""
        task = self.store.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, payload: TaskCreate) -> Task:
        """创建任务，id 由存储分配（当前最大 id + 1）"""
        data = payload.model_dump()
        data.pop("id", None)

        task = Task(id=self.store.next_id(), **data)
        self.store.save(task)

        logger.info(f"任务已创建: {task.id}, 标题: {task.title}")
        return task

    def update_task(self, task_id: int, payload: TaskUpdate) -> Task:
        """浅合并更新：提供的字段覆盖原值，其余保留，id 不变"""
        task = self.get_task(task_id)

        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None and key != "id"
        }
        updated = Task(**{**task.model_dump(), **changes, "id": task_id})
        self.store.save(updated)

        logger.info(f"任务已更新: {task_id}, 字段: {sorted(changes)}")
        return updated

    def delete_task(self, task_id: int) -> None:
        """删除任务，不存在时抛出 TaskNotFoundError"""
        if not self.store.delete(task_id):
            raise TaskNotFoundError(task_id)
        logger.info(f"任务已删除: {task_id}")
