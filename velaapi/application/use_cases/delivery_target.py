"""DeliveryTargetUseCase - 交付目标管理用例

业务场景：
平台 API 对 DeliveryTarget 资源提供列表、查询、详情、创建、更新、删除能力。

职责：
1. 请求 → 校验/补全 → 存储调用 → 响应转换
2. 把存储层的"记录不存在"翻译为领域异常
3. 构造详情视图时补充 Project 摘要和集群别名（尽力而为，失败只记日志）

用例本身无状态：每次调用都是一次独立的同步存储往返，一致性（名称唯一、
单条记录写入原子性）由底层存储保证。
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from velaapi.domain.entities import ClusterTarget, DeliveryTarget, Project
from velaapi.domain.exceptions import (
    DeliveryTargetExistError,
    DeliveryTargetNotFoundError,
    RecordNotExistError,
)
from velaapi.domain.ports import (
    AppCounter,
    ClusterStore,
    DeliveryTargetStore,
    ListOptions,
    ProjectService,
    SortOption,
    SortOrder,
    ZeroAppCounter,
)

logger = logging.getLogger(__name__)


@dataclass
class CreateDeliveryTargetInput:
    """创建 DeliveryTarget 的输入参数

    属性说明：
    - name: 名称（必需，全局唯一）
    - project: 所属 Project 名称（必需，必须已存在）
    - alias / description: 展示信息
    - cluster: 集群引用（可选）
    - variable: 不透明的键值载荷
    """

    name: str
    project: str
    alias: str = ""
    description: str = ""
    cluster: ClusterTarget | None = None
    variable: dict[str, Any] | None = None


@dataclass
class UpdateDeliveryTargetInput:
    """更新 DeliveryTarget 的输入参数（整体替换四个可变字段）"""

    alias: str = ""
    description: str = ""
    cluster: ClusterTarget | None = None
    variable: dict[str, Any] | None = None


@dataclass
class ProjectSummary:
    name: str
    alias: str = ""
    namespace: str = ""
    description: str = ""
    create_time: datetime | None = None
    update_time: datetime | None = None


@dataclass
class DeliveryTargetView:
    """DeliveryTarget 对外视图（列表项与详情共用）

    project 与 cluster_alias 为补充信息，查询失败时为 None。
    """

    name: str
    alias: str
    description: str
    namespace: str
    cluster: ClusterTarget | None
    variable: dict[str, Any]
    app_num: int
    create_time: datetime | None
    update_time: datetime | None
    project: ProjectSummary | None = None
    cluster_alias: str | None = None


@dataclass
class DeliveryTargetList:
    targets: list[DeliveryTargetView] = field(default_factory=list)
    total: int = 0


def _project_summary(project: Project) -> ProjectSummary:
    return ProjectSummary(
        name=project.name,
        alias=project.alias,
        namespace=project.namespace,
        description=project.description,
        create_time=project.create_time,
        update_time=project.update_time,
    )


class DeliveryTargetUseCase:
    """DeliveryTarget 管理用例

    依赖（通过构造函数注入）：
    - target_store: DeliveryTarget 存储
    - cluster_store: Cluster 存储（仅用于查询集群别名）
    - project_service: Project 查询
    - app_counter: 应用数量统计（默认固定为 0）
    """

    def __init__(
        self,
        target_store: DeliveryTargetStore,
        cluster_store: ClusterStore,
        project_service: ProjectService,
        app_counter: AppCounter | None = None,
    ):
        self.target_store = target_store
        self.cluster_store = cluster_store
        self.project_service = project_service
        self.app_counter = app_counter or ZeroAppCounter()

    def list_delivery_targets(self, page: int, page_size: int, project: str = "") -> DeliveryTargetList:
        """分页列出 DeliveryTarget

        参数：
            page / page_size: 分页参数（任一 <= 0 表示不分页）
            project: Project 过滤条件，空字符串表示不过滤

        返回：
            DeliveryTargetList，total 为不分页的匹配总数

        说明：
            无法解码的记录会被跳过（记录警告），不影响其余结果。
        """
        filters = {"project": project} if project else {}
        options = ListOptions(
            page=page,
            page_size=page_size,
            sort_by=[SortOption(key="create_time", order=SortOrder.DESCENDING)],
        )
        results = self.target_store.list(filters, options)

        targets = []
        for result in results:
            if not result.ok:
                logger.warning("skip undecodable delivery target %s: %s", result.key, result.error)
                continue
            targets.append(self._to_view(result.entity))

        total = self.target_store.count(filters)
        return DeliveryTargetList(targets=targets, total=total)

    def get_delivery_target(self, name: str) -> DeliveryTarget:
        """根据名称获取 DeliveryTarget

        抛出：
            DeliveryTargetNotFoundError: 不存在时
            DataStoreError: 其他存储错误（原样传播）
        """
        try:
            return self.target_store.get(name)
        except RecordNotExistError as e:
            raise DeliveryTargetNotFoundError(name) from e

    def detail_delivery_target(self, target: DeliveryTarget) -> DeliveryTargetView:
        """把已加载的 DeliveryTarget 转换为详情视图（不修改存储）"""
        return self._to_view(target)

    def create_delivery_target(self, input_data: CreateDeliveryTargetInput) -> DeliveryTargetView:
        """创建 DeliveryTarget

        执行流程：
        1. 根据请求构造候选实体
        2. 检查名称是否已存在（检查失败同样视为已存在）
        3. 解析所属 Project（不存在时直接失败，不写存储）
        4. namespace / project 取自 Project
        5. 写入存储
        6. 返回详情视图

        抛出：
            DeliveryTargetExistError: 名称已存在或存在性检查失败
            ProjectNotFoundError: 引用的 Project 不存在
            DataStoreError: 写入失败
        """
        target = DeliveryTarget.new(
            name=input_data.name,
            alias=input_data.alias,
            description=input_data.description,
            cluster=input_data.cluster,
            variable=input_data.variable,
        )

        try:
            exists = self.target_store.is_exist(target.name)
        except Exception as e:
            logger.error("check delivery target name %s is exist failure: %s", target.name, e)
            raise DeliveryTargetExistError(target.name) from e
        if exists:
            raise DeliveryTargetExistError(target.name)

        project = self.project_service.get_project(input_data.project)
        target.namespace = project.namespace
        target.project = project.name

        self.target_store.add(target)
        logger.info("delivery target %s created in project %s", target.name, target.project)
        return self.detail_delivery_target(target)

    def update_delivery_target(
        self, target: DeliveryTarget, input_data: UpdateDeliveryTargetInput
    ) -> DeliveryTargetView:
        """更新 DeliveryTarget 的可变字段并整体写回

        name / project / namespace 不会被修改。
        """
        target.apply_update(
            alias=input_data.alias,
            description=input_data.description,
            cluster=input_data.cluster,
            variable=input_data.variable,
        )
        self.target_store.put(target)
        return self.detail_delivery_target(target)

    def delete_delivery_target(self, name: str) -> None:
        """删除 DeliveryTarget

        抛出：
            DeliveryTargetNotFoundError: 不存在时
        """
        try:
            self.target_store.delete(name)
        except RecordNotExistError as e:
            raise DeliveryTargetNotFoundError(name) from e
        logger.info("delivery target %s deleted", name)

    # ==================== 视图转换 ====================

    def _to_view(self, target: DeliveryTarget) -> DeliveryTargetView:
        view = DeliveryTargetView(
            name=target.name,
            alias=target.alias,
            description=target.description,
            namespace=target.namespace,
            cluster=target.cluster,
            variable=dict(target.variable),
            app_num=self.app_counter.count_apps(target),
            create_time=target.create_time,
            update_time=target.update_time,
        )
        view.project = self._lookup_project(target.project)
        if target.cluster is not None and target.cluster.cluster_name:
            view.cluster_alias = self._lookup_cluster_alias(target.cluster.cluster_name)
        return view

    def _lookup_project(self, name: str) -> ProjectSummary | None:
        try:
            project = self.project_service.get_project(name)
        except Exception as e:
            logger.error("query project info failure: %s", e)
            return None
        return _project_summary(project)

    def _lookup_cluster_alias(self, cluster_name: str) -> str | None:
        try:
            cluster = self.cluster_store.get(cluster_name)
        except Exception as e:
            logger.error("query cluster info failure: %s", e)
            return None
        return cluster.alias
