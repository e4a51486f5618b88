"""领域层 - 实体、端口、异常

设计原则：
- 纯 Python 实现，不依赖任何框架
- 端口（Protocol）定义契约，实现在基础设施层
"""
