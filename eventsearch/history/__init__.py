"""
Event-history backtracking (FROZEN)

Enumerates every terminal state of a nondeterministic Subject by replaying
event logs onto fresh instances instead of snapshotting subject state.

Invariants:
- A History is append-only; only restart() moves its cursor backwards.
- Branches copy histories, never alias them.
- Replaying a history on a fresh subject reproduces the same state.
- Search order is FIFO; candidate 0 continues in place.
"""

from .history import History
from .subject import Subject
from .pair import Pair
from .replay import Outcome, advance_one, align
from .runner import Runner, SearchStats, Terminal, TerminalStatus, execute

__all__ = [
    "History",
    "Subject",
    "Pair",
    "Outcome",
    "advance_one",
    "align",
    "Runner",
    "SearchStats",
    "Terminal",
    "TerminalStatus",
    "execute",
]
