"""Projects / Clusters 路由

- GET /api/v1/projects - 列出 Project
- POST /api/v1/projects - 创建 Project
- GET /api/v1/clusters - 列出 Cluster
- POST /api/v1/clusters - 登记 Cluster
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from velaapi.application import (
    ClusterUseCase,
    CreateClusterInput,
    CreateProjectInput,
    ProjectUseCase,
)
from velaapi.infrastructure.database.engine import get_db_session
from velaapi.interfaces.api.dependencies import get_cluster_use_case, get_project_use_case
from velaapi.interfaces.api.dto import (
    ClusterListResponse,
    ClusterResponse,
    CreateClusterRequest,
    CreateProjectRequest,
    ErrorResponse,
    ProjectListResponse,
    ProjectResponse,
)
from velaapi.interfaces.api.errors import to_http_exception

router = APIRouter(tags=["Projects"], responses={400: {"model": ErrorResponse}})


@router.get("/projects", response_model=ProjectListResponse)
def list_projects(
    use_case: ProjectUseCase = Depends(get_project_use_case),
) -> ProjectListResponse:
    try:
        projects = use_case.list_projects()
    except Exception as e:
        raise to_http_exception(e)
    return ProjectListResponse(projects=[ProjectResponse.model_validate(p) for p in projects])


@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    request: CreateProjectRequest,
    use_case: ProjectUseCase = Depends(get_project_use_case),
    session: Session = Depends(get_db_session),
) -> ProjectResponse:
    try:
        project = use_case.create_project(
            CreateProjectInput(
                name=request.name,
                alias=request.alias,
                description=request.description,
                namespace=request.namespace,
            )
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise to_http_exception(e)
    return ProjectResponse.model_validate(project)


@router.get("/clusters", response_model=ClusterListResponse)
def list_clusters(
    use_case: ClusterUseCase = Depends(get_cluster_use_case),
) -> ClusterListResponse:
    try:
        clusters = use_case.list_clusters()
    except Exception as e:
        raise to_http_exception(e)
    return ClusterListResponse(clusters=[ClusterResponse.model_validate(c) for c in clusters])


@router.post("/clusters", response_model=ClusterResponse, status_code=status.HTTP_201_CREATED)
def create_cluster(
    request: CreateClusterRequest,
    use_case: ClusterUseCase = Depends(get_cluster_use_case),
    session: Session = Depends(get_db_session),
) -> ClusterResponse:
    try:
        cluster = use_case.create_cluster(
            CreateClusterInput(
                name=request.name,
                alias=request.alias,
                description=request.description,
            )
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise to_http_exception(e)
    return ClusterResponse.model_validate(cluster)
