"""ProjectUseCase - Project 管理用例

同时实现 ProjectService 端口，供 DeliveryTargetUseCase 按名称查询 Project。
"""

import logging
from dataclasses import dataclass

from velaapi.domain.entities import Project
from velaapi.domain.exceptions import (
    AlreadyExistsError,
    ProjectNotFoundError,
    RecordExistError,
    RecordNotExistError,
)
from velaapi.domain.ports import ListOptions, ProjectStore, SortOption, SortOrder

logger = logging.getLogger(__name__)


@dataclass
class CreateProjectInput:
    """创建 Project 的输入参数

    namespace 为空时使用 name 作为命名空间。
    """

    name: str
    alias: str = ""
    description: str = ""
    namespace: str = ""


class ProjectUseCase:
    def __init__(self, project_store: ProjectStore):
        self.project_store = project_store

    def get_project(self, name: str) -> Project:
        """根据名称获取 Project

        抛出：
            ProjectNotFoundError: 当 Project 不存在时
        """
        try:
            return self.project_store.get(name)
        except RecordNotExistError as e:
            raise ProjectNotFoundError(name) from e

    def create_project(self, input_data: CreateProjectInput) -> Project:
        project = Project.new(
            name=input_data.name,
            alias=input_data.alias,
            description=input_data.description,
            namespace=input_data.namespace,
        )
        if self.project_store.is_exist(project.name):
            raise AlreadyExistsError(entity_type="Project", entity_id=project.name)
        try:
            self.project_store.add(project)
        except RecordExistError as e:
            raise AlreadyExistsError(entity_type="Project", entity_id=project.name) from e
        logger.info("project %s created with namespace %s", project.name, project.namespace)
        return project

    def list_projects(self) -> list[Project]:
        results = self.project_store.list(
            options=ListOptions(sort_by=[SortOption(key="create_time", order=SortOrder.DESCENDING)])
        )
        projects = []
        for result in results:
            if not result.ok:
                logger.warning("skip undecodable project %s: %s", result.key, result.error)
                continue
            projects.append(result.entity)
        return projects
