from .app_config import AppConfig
from .log_config import LogConfig
from .search_config import SearchConfig
from .team_config import TeamConfig

__all__ = ["AppConfig", "LogConfig", "SearchConfig", "TeamConfig"]
