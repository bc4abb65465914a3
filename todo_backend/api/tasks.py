from typing import List

from fastapi import APIRouter, Depends, Request

from ..models.task import (
    Task,
    TaskCreate,
    TaskUpdate,
    DeleteTaskResponse,
    ErrorResponse,
)
from ..services.task_service import TaskService

router = APIRouter(prefix="/tasks")

NOT_FOUND = {404: {"model": ErrorResponse, "description": "任务不存在"}}


def get_task_service(request: Request) -> TaskService:
    """从应用状态中获取任务服务（存储在启动时初始化）"""
    return TaskService(request.app.state.task_store)


@router.get(
    "",
    response_model=List[Task],
    summary="列出所有任务",
    description="按创建顺序返回全部任务"
)
async def list_tasks(service: TaskService = Depends(get_task_service)):
    return service.list_tasks()


@router.get(
    "/{task_id}",
    response_model=Task,
    responses=NOT_FOUND,
    summary="查询任务",
    description="根据任务 ID 查询任务详情"
)
async def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """
    查询任务

    - **task_id**: 任务ID
    """
    return service.get_task(task_id)


@router.post(
    "",
    response_model=Task,
    status_code=201,
    summary="创建任务",
    description="创建新任务，id 由服务端分配"
)
async def create_task(
    payload: TaskCreate,
    service: TaskService = Depends(get_task_service)
):
    """
    创建任务

    - **title**: 任务标题
    - **description**: 任务描述（可选）
    - **completed**: 是否完成（默认 false）
    """
    return service.create_task(payload)


@router.put(
    "/{task_id}",
    response_model=Task,
    responses=NOT_FOUND,
    summary="更新任务",
    description="合并更新任务字段，未提供的字段保持不变"
)
async def update_task(
    task_id: int,
    payload: TaskUpdate,
    service: TaskService = Depends(get_task_service)
):
    """
    更新任务

    - **task_id**: 任务ID
    - 请求体中的 id 会被忽略
    """
    return service.update_task(task_id, payload)


@router.delete(
    "/{task_id}",
    response_model=DeleteTaskResponse,
    responses=NOT_FOUND,
    summary="删除任务"
)
async def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
    service.delete_task(task_id)
    return DeleteTaskResponse()
