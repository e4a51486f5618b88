"""DTO 公共约束

资源名称规则：小写字母开头，小写字母/数字/中划线组成，不以中划线结尾，2-32 个字符。
"""

from typing import Annotated

from pydantic import BaseModel, Field

NAME_PATTERN = r"^[a-z][a-z0-9-]*[a-z0-9]$"
ALIAS_MAX_LENGTH = 64

ResourceName = Annotated[str, Field(pattern=NAME_PATTERN, min_length=2, max_length=32)]
Alias = Annotated[str, Field(max_length=ALIAS_MAX_LENGTH)]


class ErrorResponse(BaseModel):
    """错误响应（错误码见 X-Error-Code 响应头）"""

    detail: str


class EmptyResponse(BaseModel):
    pass
