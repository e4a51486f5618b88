"""DeliveryTargets 路由

定义 DeliveryTarget 相关的 API 端点：
- GET /api/v1/targets - 分页列出（可按 project 过滤）
- POST /api/v1/targets - 创建
- GET /api/v1/targets/{name} - 获取详情
- PUT /api/v1/targets/{name} - 更新
- DELETE /api/v1/targets/{name} - 删除

设计原则：
1. 路由只负责 HTTP 层的事情（请求解析、调用用例、异常映射、事务提交）
2. 不包含业务逻辑
3. 依赖注入：用例由 dependencies 模块按请求组装
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from velaapi.application import (
    CreateDeliveryTargetInput,
    DeliveryTargetUseCase,
    UpdateDeliveryTargetInput,
)
from velaapi.config import settings
from velaapi.infrastructure.database.engine import get_db_session
from velaapi.interfaces.api.dependencies import get_delivery_target_use_case
from velaapi.interfaces.api.dto import (
    CreateDeliveryTargetRequest,
    DetailDeliveryTargetResponse,
    EmptyResponse,
    ErrorResponse,
    ListDeliveryTargetResponse,
    UpdateDeliveryTargetRequest,
)
from velaapi.interfaces.api.errors import to_http_exception

router = APIRouter(
    prefix="/targets",
    tags=["DeliveryTargets"],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("", response_model=ListDeliveryTargetResponse)
def list_delivery_targets(
    page: int = Query(default=1, ge=0),
    page_size: int = Query(default=settings.default_page_size, ge=0, alias="pageSize"),
    project: str = Query(default=""),
    use_case: DeliveryTargetUseCase = Depends(get_delivery_target_use_case),
) -> ListDeliveryTargetResponse:
    """分页列出 DeliveryTarget

    查询参数：
    - page / pageSize: 分页（任一为 0 表示返回全部）
    - project: 按 Project 过滤（可选）
    """
    try:
        result = use_case.list_delivery_targets(page=page, page_size=page_size, project=project)
    except Exception as e:
        raise to_http_exception(e)
    return ListDeliveryTargetResponse.model_validate(result)


@router.post("", response_model=DetailDeliveryTargetResponse, status_code=status.HTTP_201_CREATED)
def create_delivery_target(
    request: CreateDeliveryTargetRequest,
    use_case: DeliveryTargetUseCase = Depends(get_delivery_target_use_case),
    session: Session = Depends(get_db_session),
) -> DetailDeliveryTargetResponse:
    """创建 DeliveryTarget

    异常处理：
    - 400: 名称已存在
    - 404: Project 不存在
    - 500: 存储错误
    """
    try:
        view = use_case.create_delivery_target(
            CreateDeliveryTargetInput(
                name=request.name,
                project=request.project,
                alias=request.alias,
                description=request.description,
                cluster=request.cluster.to_value() if request.cluster else None,
                variable=request.variable,
            )
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise to_http_exception(e)
    return DetailDeliveryTargetResponse.model_validate(view)


@router.get("/{name}", response_model=DetailDeliveryTargetResponse)
def detail_delivery_target(
    name: str,
    use_case: DeliveryTargetUseCase = Depends(get_delivery_target_use_case),
) -> DetailDeliveryTargetResponse:
    try:
        target = use_case.get_delivery_target(name)
        view = use_case.detail_delivery_target(target)
    except Exception as e:
        raise to_http_exception(e)
    return DetailDeliveryTargetResponse.model_validate(view)


@router.put("/{name}", response_model=DetailDeliveryTargetResponse)
def update_delivery_target(
    name: str,
    request: UpdateDeliveryTargetRequest,
    use_case: DeliveryTargetUseCase = Depends(get_delivery_target_use_case),
    session: Session = Depends(get_db_session),
) -> DetailDeliveryTargetResponse:
    """更新 DeliveryTarget（alias、description、cluster、variable 整体替换）"""
    try:
        target = use_case.get_delivery_target(name)
        view = use_case.update_delivery_target(
            target,
            UpdateDeliveryTargetInput(
                alias=request.alias,
                description=request.description,
                cluster=request.cluster.to_value() if request.cluster else None,
                variable=request.variable,
            ),
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise to_http_exception(e)
    return DetailDeliveryTargetResponse.model_validate(view)


@router.delete("/{name}", response_model=EmptyResponse)
def delete_delivery_target(
    name: str,
    use_case: DeliveryTargetUseCase = Depends(get_delivery_target_use_case),
    session: Session = Depends(get_db_session),
) -> EmptyResponse:
    try:
        use_case.delete_delivery_target(name)
        session.commit()
    except Exception as e:
        session.rollback()
        raise to_http_exception(e)
    return EmptyResponse()
