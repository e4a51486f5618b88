"""HTTP API（FastAPI）"""
