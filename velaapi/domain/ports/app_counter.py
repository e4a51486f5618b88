"""AppCounter Port - 统计交付到某个 DeliveryTarget 的应用数量

应用模型尚未接入，默认实现 ZeroAppCounter 固定返回 0；
接入应用存储后注入真实实现即可，用例代码无需修改。
"""

from typing import Protocol

from velaapi.domain.entities import DeliveryTarget


class AppCounter(Protocol):
    def count_apps(self, target: DeliveryTarget) -> int: ...


class ZeroAppCounter:
    def count_apps(self, target: DeliveryTarget) -> int:
        return 0
