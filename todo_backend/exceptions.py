"""任务服务自定义异常"""


class TaskStoreError(Exception):
    """任务存储基础异常"""
    pass


class TaskNotFoundError(TaskStoreError):
    """任务不存在"""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")
