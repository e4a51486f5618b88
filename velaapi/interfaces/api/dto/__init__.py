"""API DTO（Data Transfer Objects）

DTO 职责：
1. 数据验证：使用 Pydantic 验证请求数据
2. 数据序列化：将用例视图转换为 JSON
3. 数据转换：DTO → 用例输入

DTO vs Domain Entity：
- DTO：用于 API 层，关注数据传输和验证
- Domain Entity：用于业务逻辑，关注业务规则和不变式
"""

from velaapi.interfaces.api.dto.common import EmptyResponse, ErrorResponse
from velaapi.interfaces.api.dto.delivery_target_dto import (
    ClusterTargetDTO,
    CreateDeliveryTargetRequest,
    DeliveryTargetBase,
    DetailDeliveryTargetResponse,
    ListDeliveryTargetResponse,
    ProjectBaseDTO,
    UpdateDeliveryTargetRequest,
)
from velaapi.interfaces.api.dto.project_dto import (
    ClusterListResponse,
    ClusterResponse,
    CreateClusterRequest,
    CreateProjectRequest,
    ProjectListResponse,
    ProjectResponse,
)

__all__ = [
    "ClusterListResponse",
    "ClusterResponse",
    "ClusterTargetDTO",
    "CreateClusterRequest",
    "CreateDeliveryTargetRequest",
    "CreateProjectRequest",
    "DeliveryTargetBase",
    "DetailDeliveryTargetResponse",
    "EmptyResponse",
    "ErrorResponse",
    "ListDeliveryTargetResponse",
    "ProjectBaseDTO",
    "ProjectListResponse",
    "ProjectResponse",
    "UpdateDeliveryTargetRequest",
]
