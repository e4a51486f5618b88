"""DeliveryTarget 实体 - 交付目标

业务定义：
- DeliveryTarget 描述应用可以交付到的位置：某个集群中的某个命名空间
- 归属于一个 Project，namespace 在创建时从 Project 复制，之后不可修改
- cluster 只是值类型引用（集群名 + 集群内命名空间），不拥有集群

可变字段：alias、description、cluster、variable
不可变字段：name、project、namespace
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ClusterTarget:
    """集群引用（值对象）

    属性说明：
    - cluster_name: 集群名称
    - namespace: 集群内的命名空间
    """

    cluster_name: str
    namespace: str = ""


@dataclass
class DeliveryTarget:
    """DeliveryTarget 实体

    属性说明：
    - name: 唯一标识（存储主键）
    - alias: 显示名称
    - description: 描述
    - project: 所属 Project 名称
    - namespace: 所属 Project 的命名空间（创建时复制）
    - cluster: 集群引用（可选）
    - variable: 不透明的键值载荷，语义由使用方定义
    - create_time / update_time: 由存储层在 add/put 时设置
    """

    name: str
    alias: str = ""
    description: str = ""
    project: str = ""
    namespace: str = ""
    cluster: ClusterTarget | None = None
    variable: dict[str, Any] = field(default_factory=dict)
    create_time: datetime | None = None
    update_time: datetime | None = None

    @classmethod
    def new(
        cls,
        name: str,
        alias: str = "",
        description: str = "",
        cluster: ClusterTarget | None = None,
        variable: dict[str, Any] | None = None,
    ) -> "DeliveryTarget":
        """根据创建请求构造候选实体

        project 和 namespace 留空，由用例在解析 Project 后填充。
        """
        return cls(
            name=name,
            alias=alias,
            description=description,
            cluster=cluster,
            variable=dict(variable or {}),
        )

    def apply_update(
        self,
        alias: str,
        description: str,
        cluster: ClusterTarget | None,
        variable: dict[str, Any] | None,
    ) -> None:
        """按请求原样替换可变字段（cluster 为 None 表示清除集群引用）"""
        self.alias = alias
        self.description = description
        self.cluster = cluster
        self.variable = dict(variable or {})
