"""数据库引擎配置

设计说明：
- 使用 create_engine 创建同步引擎（Repository 是同步的）
- 从配置文件读取 database_url
- SQLite 以外的数据库配置连接池参数（pool_size、max_overflow）
- 配置 echo 参数（开发环境打印 SQL）
"""

from collections.abc import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from velaapi.config import settings


def get_engine(database_url: str | None = None) -> Engine:
    """创建数据库引擎

    参数：
        database_url: 数据库 URL，默认读取 settings.database_url

    返回：
        Engine: 同步数据库引擎
    """
    url = database_url or settings.database_url

    if url.startswith("sqlite"):
        # FastAPI 的同步路由运行在线程池中，同一连接可能跨线程使用
        return create_engine(
            url,
            echo=settings.debug,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        url,
        echo=settings.debug,
        pool_size=5,  # 连接池大小
        max_overflow=10,  # 最大溢出连接数
        pool_pre_ping=True,  # 连接前检查（避免使用失效连接）
    )


# 全局同步引擎实例
sync_engine = get_engine()

# 创建 Session 工厂
SessionLocal = sessionmaker(
    bind=sync_engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


def get_db_session() -> Generator[Session, None, None]:
    """获取数据库会话

    这是 FastAPI 依赖注入函数：
    - 为每个请求创建新的 Session
    - 请求结束后自动关闭 Session
    - 事务的提交/回滚由路由负责

    Yields:
        Session: 数据库会话
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
