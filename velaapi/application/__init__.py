"""应用层 - 用例编排

Application 层职责：
1. 用例编排：协调 Domain 实体、存储端口、协作服务
2. 输入输出转换：接收输入参数，返回视图对象
3. 异常翻译：存储层异常 → 领域异常

已实现的用例：
- DeliveryTargetUseCase: DeliveryTarget 的增删改查与详情
- ProjectUseCase: Project 管理（同时实现 ProjectService 端口）
- ClusterUseCase: 集群登记

使用示例：
>>> from velaapi.application import (
...     CreateDeliveryTargetInput,
...     DeliveryTargetUseCase,
...     ProjectUseCase,
... )
>>> project_use_case = ProjectUseCase(project_store=project_store)
>>> use_case = DeliveryTargetUseCase(
...     target_store=target_store,
...     cluster_store=cluster_store,
...     project_service=project_use_case,
... )
>>> view = use_case.create_delivery_target(
...     CreateDeliveryTargetInput(name="t1", project="proj-a")
... )
"""

from velaapi.application.use_cases import (
    ClusterUseCase,
    CreateClusterInput,
    CreateDeliveryTargetInput,
    CreateProjectInput,
    DeliveryTargetList,
    DeliveryTargetUseCase,
    DeliveryTargetView,
    ProjectSummary,
    ProjectUseCase,
    UpdateDeliveryTargetInput,
)

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
