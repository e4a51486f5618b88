"""SQLAlchemy Project Store 实现"""

from velaapi.domain.entities import Project
from velaapi.infrastructure.database.models import ProjectModel
from velaapi.infrastructure.database.repositories.base_store import (
    SQLAlchemyRecordStore,
    from_db_time,
    to_db_time,
)


class SQLAlchemyProjectStore(SQLAlchemyRecordStore[Project, ProjectModel]):
    kind = "Project"
    model = ProjectModel
    index_fields = frozenset({"name", "namespace"})

    def _to_entity(self, model: ProjectModel) -> Project:
        return Project(
            name=model.name,
            alias=model.alias or "",
            description=model.description or "",
            namespace=model.namespace,
            create_time=from_db_time(model.create_time),
            update_time=from_db_time(model.update_time),
        )

    def _to_model(self, entity: Project) -> ProjectModel:
        return ProjectModel(
            name=entity.name,
            alias=entity.alias,
            description=entity.description,
            namespace=entity.namespace,
            create_time=to_db_time(entity.create_time),
            update_time=to_db_time(entity.update_time),
        )
