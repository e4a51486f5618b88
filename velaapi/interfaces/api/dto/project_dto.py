"""Project / Cluster DTO"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from velaapi.interfaces.api.dto.common import Alias, ResourceName


class CreateProjectRequest(BaseModel):
    name: ResourceName = Field(..., description="资源名称")
    alias: Alias = ""
    description: str = ""
    namespace: str = Field(default="", description="命名空间，默认与名称相同")


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    alias: str = ""
    description: str = ""
    namespace: str = ""
    create_time: datetime | None = None
    update_time: datetime | None = None


class ProjectListResponse(BaseModel):
    projects: list[ProjectResponse] = Field(default_factory=list)


class CreateClusterRequest(BaseModel):
    name: ResourceName = Field(..., description="资源名称")
    alias: Alias = ""
    description: str = ""


class ClusterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    alias: str = ""
    description: str = ""
    create_time: datetime | None = None
    update_time: datetime | None = None


class ClusterListResponse(BaseModel):
    clusters: list[ClusterResponse] = Field(default_factory=list)
