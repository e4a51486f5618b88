"""SQLAlchemy DeliveryTarget Store 实现"""

from velaapi.domain.entities import ClusterTarget, DeliveryTarget
from velaapi.infrastructure.database.models import DeliveryTargetModel
from velaapi.infrastructure.database.repositories.base_store import (
    SQLAlchemyRecordStore,
    from_db_time,
    to_db_time,
)


class SQLAlchemyDeliveryTargetStore(SQLAlchemyRecordStore[DeliveryTarget, DeliveryTargetModel]):
    """实现 DeliveryTargetStore 端口

    可过滤字段：name、project、namespace
    """

    kind = "DeliveryTarget"
    model = DeliveryTargetModel
    index_fields = frozenset({"name", "project", "namespace"})

    def _to_entity(self, model: DeliveryTargetModel) -> DeliveryTarget:
        cluster = None
        if model.cluster:
            cluster = ClusterTarget(
                cluster_name=model.cluster["cluster_name"],
                namespace=model.cluster.get("namespace", ""),
            )

        variable = model.variable or {}
        if not isinstance(variable, dict):
            raise TypeError(f"variable must be an object, got {type(variable).__name__}")

        return DeliveryTarget(
            name=model.name,
            alias=model.alias or "",
            description=model.description or "",
            project=model.project,
            namespace=model.namespace or "",
            cluster=cluster,
            variable=dict(variable),
            create_time=from_db_time(model.create_time),
            update_time=from_db_time(model.update_time),
        )

    def _to_model(self, entity: DeliveryTarget) -> DeliveryTargetModel:
        cluster = None
        if entity.cluster is not None:
            cluster = {
                "cluster_name": entity.cluster.cluster_name,
                "namespace": entity.cluster.namespace,
            }

        return DeliveryTargetModel(
            name=entity.name,
            alias=entity.alias,
            description=entity.description,
            project=entity.project,
            namespace=entity.namespace,
            cluster=cluster,
            variable=entity.variable or None,
            create_time=to_db_time(entity.create_time),
            update_time=to_db_time(entity.update_time),
        )
