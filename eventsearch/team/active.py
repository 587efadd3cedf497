#!filepath: eventsearch/team/active.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, Tuple, TypeVar

from eventsearch import logs
from eventsearch.history.subject import Subject
from eventsearch.team.team import AreEnemyFunc, League, Team

T = TypeVar("T")

NEW_TEAM = -1


@dataclass(frozen=True)
class _Roster(Generic[T]):
    """所有分支共享的只读输入：成员名单 + 敌对判定函数。"""

    members: Tuple[T, ...]
    enemy_fn: AreEnemyFunc

    @property
    def size(self) -> int:
        return len(self.members)

    def member_at(self, idx: int) -> T:
        """越界（含负数下标）抛 IndexError，不做 Python 的负数回绕。"""
        if idx < 0 or idx >= len(self.members):
            raise IndexError(f"member index {idx} out of range for {len(self.members)} members")
        return self.members[idx]


class _Active(Subject[int], Generic[T]):
    """
    逐个安置成员的搜索状态。

    event = 目标队伍下标；NEW_TEAM (-1) 表示新建一支队伍。
    pos 记录已安置的成员数，pos == roster.size 即终态。
    """

    def __init__(self, roster: _Roster[T]):
        self.roster = roster
        self.league: League[T] = League()
        self.pos = 0
        self.err: Optional[BaseException] = None

    def has_error(self) -> bool:
        return self.err is not None

    def apply_event(self, event: int) -> bool:
        if event < NEW_TEAM or event >= len(self.league):
            raise ValueError(f"event {event} out of range for {len(self.league)} teams")
        try:
            member = self.roster.member_at(self.pos)
        except IndexError as exc:
            raise ValueError(f"roster exhausted at pos={self.pos}") from exc

        if event == NEW_TEAM:
            self.league.append(Team([member]))
        else:
            self.league[event].append(member)

        self.pos += 1

        return self.pos == self.roster.size

    def next_events(self) -> List[int]:
        try:
            member = self.roster.member_at(self.pos)
        except IndexError:
            return []

        indices: List[int] = []

        for i, team in enumerate(self.league):
            try:
                ok = team.is_candidable(member, self.roster.enemy_fn)
            except Exception as exc:
                # 判定函数失败 = 分支进入错误态，由 Runner 归档为 invalid
                if self.err is None:
                    self.err = exc
                    logs.debug(f"[Team] enemy_fn failed for {member!r} at team {i}: {exc!r}")
                continue

            if ok:
                indices.append(i)

        indices.append(NEW_TEAM)

        return indices

    def __repr__(self) -> str:
        return f"_Active(pos={self.pos}, league={self.league!r}, err={self.err!r})"
