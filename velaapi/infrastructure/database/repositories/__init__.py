"""Store 实现 - 数据访问层

设计原则：
- 实现领域层定义的 RecordStore 端口
- 负责 ORM 模型 ⇄ 领域实体转换
- 把数据库异常转换为存储层异常
"""

from velaapi.infrastructure.database.repositories.base_store import SQLAlchemyRecordStore
from velaapi.infrastructure.database.repositories.cluster_store import SQLAlchemyClusterStore
from velaapi.infrastructure.database.repositories.delivery_target_store import (
    SQLAlchemyDeliveryTargetStore,
)
from velaapi.infrastructure.database.repositories.project_store import SQLAlchemyProjectStore

__all__ = [
    "SQLAlchemyClusterStore",
    "SQLAlchemyDeliveryTargetStore",
    "SQLAlchemyProjectStore",
    "SQLAlchemyRecordStore",
]
