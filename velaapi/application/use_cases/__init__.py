"""用例层"""

from velaapi.application.use_cases.cluster import ClusterUseCase, CreateClusterInput
from velaapi.application.use_cases.delivery_target import (
    CreateDeliveryTargetInput,
    DeliveryTargetList,
    DeliveryTargetUseCase,
    DeliveryTargetView,
    ProjectSummary,
    UpdateDeliveryTargetInput,
)
from velaapi.application.use_cases.project import CreateProjectInput, ProjectUseCase

__all__ = [
    "ClusterUseCase",
    "CreateClusterInput",
    "CreateDeliveryTargetInput",
    "CreateProjectInput",
    "DeliveryTargetList",
    "DeliveryTargetUseCase",
    "DeliveryTargetView",
    "ProjectSummary",
    "ProjectUseCase",
    "UpdateDeliveryTargetInput",
]
