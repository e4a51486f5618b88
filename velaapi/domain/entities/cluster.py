"""Cluster 实体

这里只记录集群的展示信息，DeliveryTarget 详情通过它补充 cluster_alias。
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Cluster:
    name: str
    alias: str = ""
    description: str = ""
    create_time: datetime | None = None
    update_time: datetime | None = None
