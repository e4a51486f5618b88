"""ORM 模型基类"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """ORM 模型基类

    所有 ORM 模型都继承自这个类，Base.metadata 包含所有表的元数据
    （用于 Alembic 迁移和 SQLite 开发环境建表）。
    """

    pass
