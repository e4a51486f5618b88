"""基础设施层 - 端口的具体实现"""
