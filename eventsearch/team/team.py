#!filepath: eventsearch/team/team.py
from __future__ import annotations

from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")

# enemy_fn(m1, m2) -> True if the two members must not share a team.
# A failing check raises; the exception is carried by the branch as its error.
AreEnemyFunc = Callable[[T, T], bool]


class Team(List[T]):
    """
    一支队伍：成员列表。
    相等性与成员顺序无关（成员之间用 == 比较）。
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, list):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(m in other for m in self)

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None  # type: ignore[assignment]

    def has_member(self, member: T) -> bool:
        return member in self

    def is_candidable(self, member: T, enemy_fn: AreEnemyFunc) -> bool:
        """
        True if `member` has no enemy in this team.
        Stops at the first enemy; exceptions from enemy_fn propagate.
        """
        for current in self:
            if enemy_fn(current, member):
                return False
        return True

    def __repr__(self) -> str:
        return f"Team({list.__repr__(self)})"


class League(List[Team[T]]):
    """
    联赛：若干 Team 的集合。
    相等性与队伍顺序无关。
    """

    def __init__(self, teams: Iterable[Iterable[T]] = ()):
        super().__init__(t if isinstance(t, Team) else Team(t) for t in teams)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, list):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(self._contains(other, team) for team in self)

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None  # type: ignore[assignment]

    def contains_team(self, team: Iterable[T]) -> bool:
        return self._contains(self, Team(team))

    @staticmethod
    def _contains(teams: list, team: Team[T]) -> bool:
        return any(team == (t if isinstance(t, Team) else Team(t)) for t in teams)

    def __repr__(self) -> str:
        return f"League({list.__repr__(self)})"
