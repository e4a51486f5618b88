"""ClusterUseCase - 集群登记

只维护集群的展示信息（alias/description），供 DeliveryTarget 详情补充集群别名。
"""

from dataclasses import dataclass

from velaapi.domain.entities import Cluster
from velaapi.domain.exceptions import AlreadyExistsError, RecordExistError
from velaapi.domain.ports import ClusterStore, ListOptions, SortOption


@dataclass
class CreateClusterInput:
    name: str
    alias: str = ""
    description: str = ""


class ClusterUseCase:
    def __init__(self, cluster_store: ClusterStore):
        self.cluster_store = cluster_store

    def create_cluster(self, input_data: CreateClusterInput) -> Cluster:
        cluster = Cluster(
            name=input_data.name,
            alias=input_data.alias,
            description=input_data.description,
        )
        if self.cluster_store.is_exist(cluster.name):
            raise AlreadyExistsError(entity_type="Cluster", entity_id=cluster.name)
        try:
            self.cluster_store.add(cluster)
        except RecordExistError as e:
            raise AlreadyExistsError(entity_type="Cluster", entity_id=cluster.name) from e
        return cluster

    def list_clusters(self) -> list[Cluster]:
        results = self.cluster_store.list(options=ListOptions(sort_by=[SortOption(key="name")]))
        return [result.entity for result in results if result.ok]
