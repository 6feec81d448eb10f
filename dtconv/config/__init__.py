#!filepath: dtconv/config/__init__.py

from .app_config import AppConfig
from .log_config import LogConfig
from .output_config import OutputConfig

__all__ = ["AppConfig", "LogConfig", "OutputConfig"]
