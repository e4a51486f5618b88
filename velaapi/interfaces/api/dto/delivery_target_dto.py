"""DeliveryTarget DTO - 交付目标数据传输对象

定义 DeliveryTarget 相关的 API 请求和响应格式

设计原则：
1. DTO 只负责数据传输，不包含业务逻辑
2. 使用 Pydantic 进行数据验证
3. 与领域模型分离：响应通过 from_attributes 从用例视图构造
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from velaapi.domain.entities import ClusterTarget
from velaapi.interfaces.api.dto.common import Alias, ResourceName


class ClusterTargetDTO(BaseModel):
    """集群引用 DTO"""

    model_config = ConfigDict(from_attributes=True)

    cluster_name: str = Field(..., description="集群名称")
    namespace: str = Field(default="", description="集群内命名空间")

    def to_value(self) -> ClusterTarget:
        return ClusterTarget(cluster_name=self.cluster_name, namespace=self.namespace)


class ProjectBaseDTO(BaseModel):
    """Project 摘要"""

    model_config = ConfigDict(from_attributes=True)

    name: str
    alias: str = ""
    namespace: str = ""
    description: str = ""
    create_time: datetime | None = None
    update_time: datetime | None = None


class CreateDeliveryTargetRequest(BaseModel):
    """创建 DeliveryTarget 请求

    namespace 不可由调用方指定，始终取自所属 Project。
    """

    name: ResourceName = Field(..., description="资源名称")
    alias: Alias = Field(default="", description="显示名称")
    description: str = Field(default="", description="描述")
    project: str = Field(..., description="所属 Project 名称", min_length=1)
    cluster: ClusterTargetDTO | None = Field(default=None, description="集群引用")
    variable: dict[str, Any] | None = Field(default=None, description="变量")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "t1",
                "alias": "Target One",
                "project": "proj-a",
                "cluster": {"cluster_name": "c1", "namespace": "prod"},
                "variable": {"region": "cn-hangzhou"},
            }
        }
    )


class UpdateDeliveryTargetRequest(BaseModel):
    """更新 DeliveryTarget 请求

    四个可变字段整体替换：未提供的 cluster 表示清除集群引用。
    """

    alias: Alias = Field(default="", description="显示名称")
    description: str = Field(default="", description="描述")
    cluster: ClusterTargetDTO | None = Field(default=None, description="集群引用")
    variable: dict[str, Any] | None = Field(default=None, description="变量")


class DeliveryTargetBase(BaseModel):
    """DeliveryTarget 响应（列表项）"""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., description="名称")
    alias: str = Field(default="", description="显示名称")
    description: str = Field(default="", description="描述")
    namespace: str = Field(default="", description="命名空间")
    project: ProjectBaseDTO | None = Field(default=None, description="所属 Project 摘要")
    cluster: ClusterTargetDTO | None = Field(default=None, description="集群引用")
    cluster_alias: str | None = Field(default=None, description="集群显示名称")
    variable: dict[str, Any] = Field(default_factory=dict, description="变量")
    app_num: int = Field(default=0, description="交付到该目标的应用数量")
    create_time: datetime | None = Field(default=None, description="创建时间")
    update_time: datetime | None = Field(default=None, description="更新时间")


class DetailDeliveryTargetResponse(DeliveryTargetBase):
    """DeliveryTarget 详情响应"""


class ListDeliveryTargetResponse(BaseModel):
    """DeliveryTarget 列表响应"""

    model_config = ConfigDict(from_attributes=True)

    targets: list[DeliveryTargetBase] = Field(default_factory=list, description="当前页")
    total: int = Field(default=0, description="匹配总数（不分页）")
