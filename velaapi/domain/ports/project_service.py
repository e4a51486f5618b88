"""ProjectService Port - Project 查询接口

DeliveryTarget 用例只依赖"按名称查 Project"这一能力。
"""

from typing import Protocol

from velaapi.domain.entities import Project


class ProjectService(Protocol):
    def get_project(self, name: str) -> Project:
        """根据名称获取 Project

        抛出：
            ProjectNotFoundError: 当 Project 不存在时
        """
        ...
