"""Todo 任务服务 - 基于内存存储的任务 CRUD API"""

__version__ = "1.0.0"
