#!filepath: speedrun_packager/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .packaging_config import PackagingConfig
from .path_config import PathConfig

ENV_APP_ROOT = "SPEEDRUN_PACKAGER_HOME"
ENV_LATEST_WORLD = "SPEEDRUN_PACKAGER_LATEST_WORLD"


def package_root() -> str:
    """
    speedrun_packager/config/app_config.py → speedrun_packager
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def default_config_path() -> str:
    return os.path.join(package_root(), "config", "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    packaging: PackagingConfig = Field(default_factory=PackagingConfig)
    paths: PathConfig = Field(default_factory=PathConfig)

    @classmethod
    def default(cls) -> "AppConfig":
        """全部使用默认值，不读文件 / 环境变量。"""
        return cls()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 speedrun_packager/config/base.yml
        - 不依赖当前工作目录
        - 环境变量覆盖 paths.*
        """
        # 1) 先加载 .env（当前目录向上查找）
        load_dotenv()

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 从 env 注入路径覆盖
        paths = dict(raw.get("paths") or {})
        if os.getenv(ENV_APP_ROOT):
            paths["app_root"] = os.getenv(ENV_APP_ROOT)
        if os.getenv(ENV_LATEST_WORLD):
            paths["latest_world_json"] = os.getenv(ENV_LATEST_WORLD)
        raw["paths"] = paths

        return cls(**raw)
