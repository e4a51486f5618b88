"""用例依赖注入

每个请求：
1. 由 get_db_session 创建独立的 Session
2. 由 ApiContainer 中的工厂基于该 Session 创建 Store
3. 组装用例

测试时可以通过 app.dependency_overrides 替换这里的任意函数。
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from velaapi.application import ClusterUseCase, DeliveryTargetUseCase, ProjectUseCase
from velaapi.infrastructure.database.engine import get_db_session
from velaapi.interfaces.api.container import ApiContainer
from velaapi.interfaces.api.dependencies.container import get_container


def get_project_use_case(
    container: ApiContainer = Depends(get_container),
    session: Session = Depends(get_db_session),
) -> ProjectUseCase:
    return ProjectUseCase(project_store=container.project_store(session))


def get_cluster_use_case(
    container: ApiContainer = Depends(get_container),
    session: Session = Depends(get_db_session),
) -> ClusterUseCase:
    return ClusterUseCase(cluster_store=container.cluster_store(session))


def get_delivery_target_use_case(
    container: ApiContainer = Depends(get_container),
    session: Session = Depends(get_db_session),
    project_use_case: ProjectUseCase = Depends(get_project_use_case),
) -> DeliveryTargetUseCase:
    """组装 DeliveryTargetUseCase

    Project 查询与 Store 共用同一个请求级 Session（FastAPI 对同一请求内的
    get_db_session 依赖只求值一次）。
    """
    return DeliveryTargetUseCase(
        target_store=container.delivery_target_store(session),
        cluster_store=container.cluster_store(session),
        project_service=project_use_case,
        app_counter=container.app_counter(session),
    )
