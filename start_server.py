#!/usr/bin/env python3
"""
启动 Todo 后端服务（单 Worker 模式）
任务只保存在进程内存中，重启后恢复为初始数据
"""
from todo_backend.main import run


if __name__ == "__main__":
    run()
