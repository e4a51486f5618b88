"""领域层异常定义

异常分两层：
1. 业务异常（DomainError 及其子类）：调用方可见，API 层统一转换为 4xx
2. 存储异常（DataStoreError 及其子类）：底层存储失败，原样向上传播

RecordNotExistError 是存储层的通用"记录不存在"信号，用例层负责把它翻译成
领域语义的异常（如 DeliveryTargetNotFoundError）。
"""


class DomainError(Exception):
    """领域层异常基类

    用途：
    - 表示业务规则违反
    - 表示调用方可见的业务失败（不存在、已存在、依赖缺失）
    """

    code = "domain_error"


class NotFoundError(DomainError):
    """实体不存在异常

    参数：
        entity_type: 实体类型（如："DeliveryTarget"、"Project"）
        entity_id: 实体标识
    """

    code = "not_found"

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} 不存在: {entity_id}")


class AlreadyExistsError(DomainError):
    """实体已存在异常（创建冲突）"""

    code = "already_exists"

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} 已存在: {entity_id}")


class DependencyNotFoundError(DomainError):
    """被引用的依赖不存在（如创建 DeliveryTarget 时引用的 Project）"""

    code = "dependency_not_found"


class DeliveryTargetNotFoundError(NotFoundError):
    code = "delivery_target_not_exist"

    def __init__(self, name: str):
        super().__init__(entity_type="DeliveryTarget", entity_id=name)


class DeliveryTargetExistError(AlreadyExistsError):
    """DeliveryTarget 名称冲突

    存在性检查本身失败时也抛出此异常（保守处理，宁可拒绝也不重复创建）。
    """

    code = "delivery_target_exist"

    def __init__(self, name: str):
        super().__init__(entity_type="DeliveryTarget", entity_id=name)


class ProjectNotFoundError(DependencyNotFoundError, NotFoundError):
    code = "project_not_exist"

    def __init__(self, name: str):
        NotFoundError.__init__(self, entity_type="Project", entity_id=name)


# ==================== 存储层异常 ====================


class DataStoreError(Exception):
    """存储层异常基类（数据库错误、非法查询条件等）"""


class RecordNotExistError(DataStoreError):
    """记录不存在"""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"record not exist: {kind}/{key}")


class RecordExistError(DataStoreError):
    """主键冲突"""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"record already exist: {kind}/{key}")


class RecordDecodeError(DataStoreError):
    """存储的记录无法还原为领域实体"""

    def __init__(self, kind: str, key: str, reason: str):
        self.kind = kind
        self.key = key
        self.reason = reason
        super().__init__(f"record decode failure: {kind}/{key}: {reason}")
