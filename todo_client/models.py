"""客户端侧的任务数据模型（仅镜像服务端返回的数据）"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Mapping


@dataclass
class Task:
    id: int
    title: str
    description: str = ""
    completed: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        return cls(
            id=int(data["id"]),
            title=str(data.get("title", "")),
            description=str(data.get("description") or ""),
            completed=bool(data.get("completed", False)),
        )

    def to_dict(self) -> dict:
        return asdict(self)
