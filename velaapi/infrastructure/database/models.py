"""ORM 模型 - 数据库表映射

ORM 模型 vs 领域实体：
- ORM 模型：数据库表映射，关注持久化（Infrastructure 层）
- 领域实体：业务逻辑，关注不变式（Domain 层）
- 通过 Store 中的 _to_entity/_to_model 转换

设计原则：
- 使用 SQLAlchemy 2.0 风格（Mapped、mapped_column）
- 主键为资源名称（name）
- 时间戳以 UTC naive datetime 存储
- 为列表查询的过滤/排序字段建索引
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from velaapi.infrastructure.database.base import Base


class DeliveryTargetModel(Base):
    """DeliveryTarget ORM 模型

    表名：delivery_targets

    字段说明：
    - cluster: {"cluster_name": ..., "namespace": ...}，可为空
    - variable: 任意 JSON 对象
    """

    __tablename__ = "delivery_targets"

    name: Mapped[str] = mapped_column(String(64), primary_key=True, comment="名称")
    alias: Mapped[str] = mapped_column(String(255), nullable=False, default="", comment="显示名称")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", comment="描述")
    project: Mapped[str] = mapped_column(String(64), nullable=False, comment="所属 Project")
    namespace: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", comment="所属 Project 的命名空间"
    )
    cluster: Mapped[dict | None] = mapped_column(JSON, nullable=True, comment="集群引用")
    variable: Mapped[dict | None] = mapped_column(JSON, nullable=True, comment="变量")
    create_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, comment="创建时间")
    update_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, comment="更新时间")

    __table_args__ = (
        Index("idx_delivery_targets_project", "project"),
        Index("idx_delivery_targets_namespace", "namespace"),
        Index("idx_delivery_targets_create_time", "create_time"),
    )

    def __repr__(self) -> str:
        return f"<DeliveryTargetModel(name={self.name}, project={self.project})>"


class ProjectModel(Base):
    """Project ORM 模型

    表名：projects
    """

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(64), primary_key=True, comment="名称")
    alias: Mapped[str] = mapped_column(String(255), nullable=False, default="", comment="显示名称")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", comment="描述")
    namespace: Mapped[str] = mapped_column(String(255), nullable=False, comment="命名空间")
    create_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, comment="创建时间")
    update_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, comment="更新时间")

    __table_args__ = (Index("idx_projects_create_time", "create_time"),)

    def __repr__(self) -> str:
        return f"<ProjectModel(name={self.name}, namespace={self.namespace})>"


class ClusterModel(Base):
    """Cluster ORM 模型

    表名：clusters
    """

    __tablename__ = "clusters"

    name: Mapped[str] = mapped_column(String(64), primary_key=True, comment="名称")
    alias: Mapped[str] = mapped_column(String(255), nullable=False, default="", comment="显示名称")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", comment="描述")
    create_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, comment="创建时间")
    update_time: Mapped[datetime] = mapped_column(DateTime, nullable=False, comment="更新时间")

    def __repr__(self) -> str:
        return f"<ClusterModel(name={self.name})>"
