"""日志配置

``setup_logging`` 为根 logger 挂载控制台 handler（以及可选的文件 handler），
只在根 logger 尚未配置时生效，重复调用（测试、多次创建 app）不会叠加 handler。

各模块统一使用 ``logger = logging.getLogger(__name__)`` 获取 logger。
"""

import json
import logging
from pathlib import Path

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """单行 JSON 日志格式（便于日志采集系统解析）"""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", logfile: str | None = None, fmt: str = "text") -> None:
    """配置根 logger

    参数：
        level: 日志级别名称（DEBUG/INFO/...，大小写不敏感）
        logfile: 日志文件路径，None 表示只输出到控制台
        fmt: "text" 或 "json"
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if fmt == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
