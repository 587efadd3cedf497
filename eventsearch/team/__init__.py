from .team import AreEnemyFunc, League, Team
from .filters import FilterFn, filter_solutions, with_n_teams
from .common import evaluate_teams

__all__ = [
    "AreEnemyFunc",
    "League",
    "Team",
    "FilterFn",
    "filter_solutions",
    "with_n_teams",
    "evaluate_teams",
]
