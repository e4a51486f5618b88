"""velaapi - DeliveryTarget 管理服务"""

__version__ = "0.1.0"
