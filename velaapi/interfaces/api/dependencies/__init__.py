"""FastAPI 依赖注入函数"""

from velaapi.interfaces.api.dependencies.container import get_container
from velaapi.interfaces.api.dependencies.use_cases import (
    get_cluster_use_case,
    get_delivery_target_use_case,
    get_project_use_case,
)

__all__ = [
    "get_cluster_use_case",
    "get_container",
    "get_delivery_target_use_case",
    "get_project_use_case",
]
