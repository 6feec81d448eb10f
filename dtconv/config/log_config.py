#!filepath: dtconv/config/log_config.py
from typing import Literal, Optional

from pydantic import BaseModel

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LogConfig(BaseModel):
    dir: Optional[str] = None  # None → 不写文件日志
    rotation: str = "1 day"
    retention: str = "30 days"
    level: LogLevel = "WARNING"
