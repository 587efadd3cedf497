#!filepath: eventsearch/__init__.py

from .utils.logger import Logging, logs, init_logging
from .config.app_config import AppConfig
from .history import History, Subject, Pair, Outcome, Runner, execute
from .team import League, Team, evaluate_teams, filter_solutions, with_n_teams

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "History", "Subject", "Pair", "Outcome", "Runner", "execute",
    "League", "Team", "evaluate_teams", "filter_solutions", "with_n_teams",
    "__version__",
]
