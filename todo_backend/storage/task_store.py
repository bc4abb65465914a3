from typing import Dict, Optional
from ..models.task import Task


SEED_TASKS = [
    {
        "id": 1,
        "title": "Buy groceries",
        "description": "Milk, eggs, bread",
        "completed": False,
    },
    {
        "id": 2,
        "title": "Finish project",
        "description": "Complete the API documentation",
        "completed": True,
    },
]


class TaskStore:
    def __init__(self):
        self._store: Dict[int, Task] = {}

    @classmethod
    def seeded(cls) -> "TaskStore":
        """创建带有初始任务的存储"""
        store = cls()
        for data in SEED_TASKS:
            store.save(Task(**data))
        return store

    def next_id(self) -> int:
        if not self._store:
            return 1
        return max(self._store) + 1

    def save(self, task: Task) -> None:
        # 已存在的 id 保持原有位置
        self._store[task.id] = task

    def get(self, task_id: int) -> Optional[Task]:
        return self._store.get(task_id)

    def list_all(self) -> list[Task]:
        return list(self._store.values())

    def delete(self, task_id: int) -> bool:
        if task_id in self._store:
            del self._store[task_id]
            return True
        return False

    def clear(self) -> None:
        self._store.clear()
