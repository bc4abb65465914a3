from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Task(BaseModel):
    """任务模型（额外字段原样保存）"""
    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="任务ID，由存储分配")
    title: str = Field(..., description="任务标题")
    description: str = Field(default="", description="任务描述")
    completed: bool = Field(default=False, description="是否已完成")


class TaskCreate(BaseModel):
    """创建任务请求（不含 id）"""
    model_config = ConfigDict(extra="allow")

    title: str = Field(..., description="任务标题")
    description: str = Field(default="", description="任务描述")
    completed: bool = Field(default=False, description="是否已完成")


class TaskUpdate(BaseModel):
    """更新任务请求（部分字段）"""
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = Field(None, description="任务标题")
    description: Optional[str] = Field(None, description="任务描述")
    completed: Optional[bool] = Field(None, description="是否已完成")


class DeleteTaskResponse(BaseModel):
    """删除任务响应"""
    message: str = Field(default="Task deleted successfully", description="响应消息")


class ErrorResponse(BaseModel):
    """错误响应"""
    error: str = Field(..., description="错误信息")
