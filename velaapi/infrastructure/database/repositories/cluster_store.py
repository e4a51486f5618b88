"""SQLAlchemy Cluster Store 实现"""

from velaapi.domain.entities import Cluster
from velaapi.infrastructure.database.models import ClusterModel
from velaapi.infrastructure.database.repositories.base_store import (
    SQLAlchemyRecordStore,
    from_db_time,
    to_db_time,
)


class SQLAlchemyClusterStore(SQLAlchemyRecordStore[Cluster, ClusterModel]):
    kind = "Cluster"
    model = ClusterModel

    def _to_entity(self, model: ClusterModel) -> Cluster:
        return Cluster(
            name=model.name,
            alias=model.alias or "",
            description=model.description or "",
            create_time=from_db_time(model.create_time),
            update_time=from_db_time(model.update_time),
        )

    def _to_model(self, entity: Cluster) -> ClusterModel:
        return ClusterModel(
            name=entity.name,
            alias=entity.alias,
            description=entity.description,
            create_time=to_db_time(entity.create_time),
            update_time=to_db_time(entity.update_time),
        )
