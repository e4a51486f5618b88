"""RecordStore Port - 通用的强类型记录存储接口

定义按实体类型参数化的持久化契约：
- 记录通过主键（name）标识
- 列表查询支持按索引字段等值过滤、排序、分页
- 列表结果逐条返回 RecordResult：解码失败的记录携带错误而不是中断整个查询

为什么使用 Protocol？
- 结构化子类型：基础设施实现不需要显式继承
- 测试时可以直接使用 Mock 或内存实现
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from velaapi.domain.entities import Cluster, DeliveryTarget, Project
from velaapi.domain.exceptions import RecordDecodeError

E = TypeVar("E")


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class SortOption:
    key: str
    order: SortOrder = SortOrder.ASCENDING


@dataclass(frozen=True)
class ListOptions:
    """列表查询选项

    分页规则：page > 0 且 page_size > 0 时跳过 (page - 1) * page_size 条，
    取 page_size 条；否则返回全部匹配记录。
    """

    page: int = 0
    page_size: int = 0
    sort_by: list[SortOption] = field(default_factory=list)

    @property
    def paginated(self) -> bool:
        return self.page > 0 and self.page_size > 0

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size if self.paginated else 0


@dataclass(frozen=True)
class RecordResult(Generic[E]):
    """列表查询的单条结果：entity 与 error 二者恰有其一"""

    key: str
    entity: E | None = None
    error: RecordDecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecordStore(Protocol[E]):
    """通用记录存储接口

    命名约定与 DataStore 语义一致：
    - get(): 获取（不存在抛 RecordNotExistError）
    - add(): 新增（设置 create_time/update_time，主键冲突抛 RecordExistError）
    - put(): 整体替换（刷新 update_time，不存在抛 RecordNotExistError）
    - delete(): 删除（不存在抛 RecordNotExistError）
    - list()/count(): 查询
    - is_exist(): 存在性检查
    """

    def get(self, key: str) -> E:
        """根据主键获取记录

        抛出：
            RecordNotExistError: 记录不存在
            RecordDecodeError: 记录无法解码
            DataStoreError: 其他存储错误
        """
        ...

    def add(self, entity: E) -> None: ...

    def put(self, entity: E) -> None: ...

    def delete(self, key: str) -> None: ...

    def list(
        self,
        filters: Mapping[str, Any] | None = None,
        options: ListOptions | None = None,
    ) -> list[RecordResult[E]]:
        """按索引字段等值过滤、排序并分页

        参数：
            filters: {字段名: 值}，只允许索引字段
            options: 分页与排序

        返回：
            RecordResult 列表（可能为空）
        """
        ...

    def count(self, filters: Mapping[str, Any] | None = None) -> int: ...

    def is_exist(self, key: str) -> bool: ...


DeliveryTargetStore = RecordStore[DeliveryTarget]
ProjectStore = RecordStore[Project]
ClusterStore = RecordStore[Cluster]
