#!filepath: eventsearch/team/filters.py
from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

from eventsearch.team.team import League

T = TypeVar("T")

FilterFn = Callable[[League[T]], bool]


def with_n_teams(n: int) -> FilterFn:
    """Keep only leagues made of exactly `n` teams."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")

    def _filter(league: League[T]) -> bool:
        return len(league) == n

    return _filter


def filter_solutions(res: List[League[T]], predicate: Optional[FilterFn]) -> List[League[T]]:
    """
    Stable in-place filter: survivors keep their relative order and `res`
    itself is truncated and returned.

    A None predicate or an empty input yields a new empty list and leaves
    `res` untouched.
    """
    if not res or predicate is None:
        return []

    top = 0
    for i in range(len(res)):
        league = res[i]
        if predicate(league):
            res[top] = league
            top += 1

    del res[top:]

    return res
