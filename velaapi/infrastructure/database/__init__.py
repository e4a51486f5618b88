"""数据库基础设施 - SQLAlchemy 配置和会话管理"""

from velaapi.infrastructure.database.base import Base
from velaapi.infrastructure.database.engine import (
    SessionLocal,
    get_db_session,
    get_engine,
    sync_engine,
)

__all__ = [
    "Base",
    "SessionLocal",
    "get_db_session",
    "get_engine",
    "sync_engine",
]
