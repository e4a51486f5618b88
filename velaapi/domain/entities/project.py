"""Project 实体 - DeliveryTarget 的归属项目"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Project:
    """Project 实体

    属性说明：
    - name: 唯一标识
    - alias: 显示名称
    - description: 描述
    - namespace: 项目对应的命名空间（未指定时与 name 相同）
    """

    name: str
    alias: str = ""
    description: str = ""
    namespace: str = ""
    create_time: datetime | None = None
    update_time: datetime | None = None

    @classmethod
    def new(cls, name: str, alias: str = "", description: str = "", namespace: str = "") -> "Project":
        return cls(
            name=name,
            alias=alias,
            description=description,
            namespace=namespace or name,
        )
