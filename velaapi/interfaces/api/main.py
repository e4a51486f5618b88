"""FastAPI 应用入口"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from velaapi.config import settings
from velaapi.domain.ports import ZeroAppCounter
from velaapi.infrastructure.database.schema import ensure_sqlite_schema
from velaapi.interfaces.api.container import ApiContainer
from velaapi.interfaces.api.routes import delivery_targets, projects
from velaapi.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _build_container() -> ApiContainer:
    def delivery_target_store(session: Session):
        from velaapi.infrastructure.database.repositories import SQLAlchemyDeliveryTargetStore

        return SQLAlchemyDeliveryTargetStore(session)

    def project_store(session: Session):
        from velaapi.infrastructure.database.repositories import SQLAlchemyProjectStore

        return SQLAlchemyProjectStore(session)

    def cluster_store(session: Session):
        from velaapi.infrastructure.database.repositories import SQLAlchemyClusterStore

        return SQLAlchemyClusterStore(session)

    def app_counter(session: Session):
        return ZeroAppCounter()

    return ApiContainer(
        delivery_target_store=delivery_target_store,
        project_store=project_store,
        cluster_store=cluster_store,
        app_counter=app_counter,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging(level=settings.log_level, logfile=settings.log_file, fmt=settings.log_format)
    logger.info("%s v%s 启动中 (env=%s)", settings.app_name, settings.app_version, settings.env)
    logger.info("数据库: %s", settings.database_url)

    try:
        ensure_sqlite_schema()
    except SQLAlchemyError as exc:
        logger.error("数据库初始化失败（请运行 Alembic 迁移）: %s", exc)

    app.state.container = _build_container()

    try:
        yield
    finally:
        logger.info("%s 关闭中...", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="DeliveryTarget 管理 API",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    return JSONResponse(
        content={
            "status": "healthy",
            "app_name": settings.app_name,
            "version": settings.app_version,
            "env": settings.env,
        }
    )


app.include_router(delivery_targets.router, prefix="/api/v1")
app.include_router(projects.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "velaapi.interfaces.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
