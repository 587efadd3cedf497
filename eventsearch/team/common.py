#!filepath: eventsearch/team/common.py
from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

from eventsearch import logs
from eventsearch.history.runner import Runner, TerminalStatus
from eventsearch.observability.instrumentation import Instrumentation, NoOpInstrumentation
from eventsearch.team.active import _Active, _Roster
from eventsearch.team.filters import FilterFn, filter_solutions
from eventsearch.team.team import AreEnemyFunc, League
from eventsearch.utils.errors import (
    NilParameterError,
    NoTeamsFoundError,
    TeamEvaluationError,
)

T = TypeVar("T")


def evaluate_teams(
    members: Iterable[T],
    enemy_fn: AreEnemyFunc,
    *filters: Optional[FilterFn],
    strict: bool = False,
    inst: Instrumentation | NoOpInstrumentation | None = None,
) -> List[League[T]]:
    """
    Enumerate every way to split `members` into teams such that no team
    holds two enemies.

    Each partition appears exactly once, in discovery order. Branches where
    enemy_fn raised are dropped, unless strict=True, in which case the first
    such failure is raised as TeamEvaluationError. Filters run after the
    search, in the order given.

    Raises:
        NilParameterError: enemy_fn is None.
        NoTeamsFoundError: the search produced no valid league.
        TeamEvaluationError: strict mode and enemy_fn failed on some branch.
    """
    if enemy_fn is None:
        raise NilParameterError("enemy_fn")

    roster: _Roster[T] = _Roster(members=tuple(members), enemy_fn=enemy_fn)

    def init_fn() -> _Active[T]:
        return _Active(roster)

    runner: Runner[int, _Active[T]] = Runner(init_fn, inst, label="evaluate_teams")
    leagues: List[League[T]] = []

    for terminal in runner.explore():
        if terminal.status is TerminalStatus.DONE:
            leagues.append(terminal.subject.league)
        elif terminal.status is TerminalStatus.ERRORED and strict:
            err = terminal.subject.err
            raise TeamEvaluationError(
                f"enemy check failed after placing {terminal.subject.pos} of {roster.size} members: {err!r}"
            ) from err

    if runner.stats.errored:
        logs.warning(f"[Team] {runner.stats.errored} branch(es) dropped: enemy_fn failed")

    if not leagues:
        raise NoTeamsFoundError(f"no teams found for {roster.size} members")

    for predicate in filters:
        leagues = filter_solutions(leagues, predicate)

    return leagues
