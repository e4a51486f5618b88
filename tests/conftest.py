"""Pytest 配置文件 - 全局 fixtures"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from velaapi.infrastructure.database import models as _models  # noqa: F401
from velaapi.infrastructure.database.base import Base


@pytest.fixture
def engine():
    """创建同步内存数据库引擎

    为什么使用 StaticPool？
    - :memory: 数据库只存在于单个连接中
    - TestClient 在线程池中执行同步路由，所有线程需要共享同一连接
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # 创建所有表
    Base.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=Session, expire_on_commit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    """创建同步数据库会话（测试结束后回滚）"""
    session = session_factory()
    yield session
    session.rollback()
    session.close()
