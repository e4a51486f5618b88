"""领域端口（Port）定义"""

from velaapi.domain.ports.app_counter import AppCounter, ZeroAppCounter
from velaapi.domain.ports.project_service import ProjectService
from velaapi.domain.ports.record_store import (
    ClusterStore,
    DeliveryTargetStore,
    ListOptions,
    ProjectStore,
    RecordResult,
    RecordStore,
    SortOption,
    SortOrder,
)

__all__ = [
    "AppCounter",
    "ClusterStore",
    "DeliveryTargetStore",
    "ListOptions",
    "ProjectService",
    "ProjectStore",
    "RecordResult",
    "RecordStore",
    "SortOption",
    "SortOrder",
    "ZeroAppCounter",
]
