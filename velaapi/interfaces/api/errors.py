"""领域异常 → HTTP 响应映射

- NotFoundError / DependencyNotFoundError → 404
- 其他 DomainError（如 AlreadyExistsError）→ 400
- DataStoreError 及未知异常 → 500

错误码放在 X-Error-Code 响应头中，便于前端区分同一状态码下的不同原因。
"""

import logging

from fastapi import HTTPException, status

from velaapi.domain.exceptions import DependencyNotFoundError, DomainError, NotFoundError

logger = logging.getLogger(__name__)


def to_http_exception(error: Exception) -> HTTPException:
    if isinstance(error, NotFoundError | DependencyNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, DomainError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        logger.exception("unexpected failure: %s", error)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(error),
            headers={"X-Error-Code": "internal_error"},
        )
    return HTTPException(
        status_code=status_code,
        detail=str(error),
        headers={"X-Error-Code": error.code},
    )
