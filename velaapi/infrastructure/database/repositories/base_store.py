"""SQLAlchemy 通用记录存储

第一性原理：Store 是领域对象和数据存储之间的转换器

职责：
1. 转换（Translation）：领域实体 ⇄ ORM 模型（由子类实现）
2. 持久化（Persistence）：get/add/put/delete/list/count/is_exist
3. 异常转换（Exception Translation）：SQLAlchemyError → DataStoreError，
   解码失败 → RecordDecodeError

事务约定：
- Store 只 flush，不 commit
- 调用者（路由）负责 commit/rollback
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from velaapi.domain.exceptions import (
    DataStoreError,
    RecordDecodeError,
    RecordExistError,
    RecordNotExistError,
)
from velaapi.domain.ports import ListOptions, RecordResult, SortOrder
from velaapi.infrastructure.database.base import Base

E = TypeVar("E")
M = TypeVar("M", bound=Base)

# 实体数据与存储格式不符时 _to_entity 会抛出的异常
DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def utcnow() -> datetime:
    return datetime.now(UTC)


def to_db_time(value: datetime) -> datetime:
    """aware datetime → UTC naive（数据库存储格式）"""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.replace(tzinfo=None)


def from_db_time(value: datetime | None) -> datetime | None:
    return value.replace(tzinfo=UTC) if value is not None else None


class SQLAlchemyRecordStore(Generic[E, M]):
    """RecordStore 端口的 SQLAlchemy 实现

    子类需要声明：
    - kind: 资源类型名（用于错误信息）
    - model: ORM 模型类（主键列为 name）
    - index_fields: 允许过滤的字段
    - sort_fields: 允许排序的字段
    - _to_entity / _to_model: 转换方法

    实体需要具有 name、create_time、update_time 属性。
    """

    kind: str
    model: type[M]
    index_fields: frozenset[str] = frozenset({"name"})
    sort_fields: frozenset[str] = frozenset({"name", "create_time", "update_time"})

    def __init__(self, session: Session):
        """初始化 Store

        参数：
            session: SQLAlchemy 同步会话
        """
        self.session = session

    # ==================== Assembler 方法 ====================

    def _to_entity(self, model: M) -> E:
        raise NotImplementedError

    def _to_model(self, entity: E) -> M:
        raise NotImplementedError

    def _decode(self, model: M) -> E:
        try:
            return self._to_entity(model)
        except DECODE_ERRORS as e:
            raise RecordDecodeError(self.kind, model.name, str(e)) from e

    # ==================== 查询辅助 ====================

    @contextmanager
    def _database_errors(self) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            raise DataStoreError(f"{self.kind} store failure: {e}") from e

    def _find(self, key: str) -> M | None:
        return self.session.get(self.model, key)

    def _apply_filters(self, stmt: Select, filters: Mapping[str, Any] | None) -> Select:
        for field_name, value in (filters or {}).items():
            if field_name not in self.index_fields:
                raise DataStoreError(f"{self.kind} can not be filtered by {field_name}")
            stmt = stmt.where(getattr(self.model, field_name) == value)
        return stmt

    def _apply_options(self, stmt: Select, options: ListOptions) -> Select:
        for sort in options.sort_by:
            if sort.key not in self.sort_fields:
                raise DataStoreError(f"{self.kind} can not be sorted by {sort.key}")
            column = getattr(self.model, sort.key)
            stmt = stmt.order_by(column.desc() if sort.order == SortOrder.DESCENDING else column.asc())
        if options.paginated:
            stmt = stmt.offset(options.offset).limit(options.page_size)
        return stmt

    # ==================== RecordStore 方法 ====================

    def get(self, key: str) -> E:
        with self._database_errors():
            model = self._find(key)
        if model is None:
            raise RecordNotExistError(self.kind, key)
        return self._decode(model)

    def add(self, entity: E) -> None:
        """新增记录，设置 create_time 与 update_time

        抛出：
            RecordExistError: 主键已存在
        """
        with self._database_errors():
            if self._find(entity.name) is not None:
                raise RecordExistError(self.kind, entity.name)

            now = utcnow()
            entity.create_time = now
            entity.update_time = now
            self.session.add(self._to_model(entity))
            try:
                self.session.flush()
            except IntegrityError as e:
                # 并发创建时由主键约束兜底
                raise RecordExistError(self.kind, entity.name) from e

    def put(self, entity: E) -> None:
        """整体替换记录，保留存储中的 create_time，刷新 update_time

        抛出：
            RecordNotExistError: 记录不存在
        """
        with self._database_errors():
            existing = self._find(entity.name)
            if existing is None:
                raise RecordNotExistError(self.kind, entity.name)

            entity.create_time = from_db_time(existing.create_time)
            entity.update_time = utcnow()
            self.session.merge(self._to_model(entity))
            self.session.flush()

    def delete(self, key: str) -> None:
        with self._database_errors():
            model = self._find(key)
            if model is None:
                raise RecordNotExistError(self.kind, key)
            self.session.delete(model)
            self.session.flush()

    def list(
        self,
        filters: Mapping[str, Any] | None = None,
        options: ListOptions | None = None,
    ) -> list[RecordResult[E]]:
        stmt = self._apply_filters(select(self.model), filters)
        stmt = self._apply_options(stmt, options or ListOptions())

        with self._database_errors():
            models = self.session.scalars(stmt).all()

        results: list[RecordResult[E]] = []
        for model in models:
            try:
                results.append(RecordResult(key=model.name, entity=self._decode(model)))
            except RecordDecodeError as e:
                results.append(RecordResult(key=model.name, error=e))
        return results

    def count(self, filters: Mapping[str, Any] | None = None) -> int:
        stmt = self._apply_filters(select(func.count()).select_from(self.model), filters)
        with self._database_errors():
            return self.session.scalar(stmt) or 0

    def is_exist(self, key: str) -> bool:
        with self._database_errors():
            return self._find(key) is not None
