#!filepath: dtconv/config/app_config.py
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .log_config import LogConfig
from .output_config import OutputConfig
from dtconv import logs
from dtconv.utils.errors import ConfigError

ENV_LOG_LEVEL = "DTCONV_LOG_LEVEL"


def default_config_path() -> Path:
    """
    包内默认配置：dtconv/config/base.yml
    不依赖当前工作目录
    """
    return Path(__file__).resolve().with_name("base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 base.yml
        - 当前目录下的 .env 可设置 DTCONV_LOG_LEVEL（覆盖 log.level）
        """
        # 1) 先加载 .env（不覆盖已有环境变量）
        load_dotenv(Path.cwd() / ".env")

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Config file is not valid YAML: {path}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        # 4) env 覆盖
        level = os.getenv(ENV_LOG_LEVEL)
        if level:
            raw["log"] = {**(raw.get("log") or {}), "level": level.upper()}

        try:
            cfg = cls(**raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}: {e}") from e

        logs.debug(f"[AppConfig] loaded {path}")
        return cfg
