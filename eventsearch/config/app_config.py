#!filepath: eventsearch/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .search_config import SearchConfig
from .team_config import TeamConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    eventsearch/config/app_config.py → eventsearch/config → eventsearch → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    team: TeamConfig = Field(default_factory=TeamConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 eventsearch/config/base.yml
        - EVENTSEARCH_LOG_LEVEL 覆盖 log.level
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        level = os.getenv("EVENTSEARCH_LOG_LEVEL")
        if level:
            raw["log"] = {**(raw.get("log") or {}), "level": level.upper()}

        return cls(**raw)
