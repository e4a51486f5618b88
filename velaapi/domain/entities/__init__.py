"""领域实体"""

from velaapi.domain.entities.cluster import Cluster
from velaapi.domain.entities.delivery_target import ClusterTarget, DeliveryTarget
from velaapi.domain.entities.project import Project

__all__ = ["Cluster", "ClusterTarget", "DeliveryTarget", "Project"]
