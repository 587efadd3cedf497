#!filepath: eventsearch/history/history.py
from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

E = TypeVar("E")


class History(Generic[E]):
    """
    History = 可重放的事件日志 + 读指针（cursor）

    Invariants:
    - timeline 只追加（append-only）
    - cursor 只向前移动，唯一例外是 restart()
    - 0 <= cursor <= len(timeline)

    History 不引用任何 Subject；copy() 产生独立的 timeline，
    分支之间永远不共享存储。
    """

    __slots__ = ("_timeline", "_cursor")

    def __init__(self, events: Optional[Iterable[E]] = None):
        self._timeline: List[E] = list(events) if events is not None else []
        self._cursor: int = 0

    # --------------------------------------------------
    # read-only views
    # --------------------------------------------------
    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def timeline(self) -> Tuple[E, ...]:
        return tuple(self._timeline)

    @property
    def remaining(self) -> int:
        """Number of recorded events not yet replayed."""
        return len(self._timeline) - self._cursor

    @property
    def is_exhausted(self) -> bool:
        return self._cursor >= len(self._timeline)

    def __len__(self) -> int:
        return len(self._timeline)

    def __repr__(self) -> str:
        return f"History(timeline={self._timeline!r}, cursor={self._cursor})"

    # --------------------------------------------------
    # mutation
    # --------------------------------------------------
    def copy(self) -> "History[E]":
        """
        Independent copy: duplicated timeline, same cursor.
        Events themselves are shared, so they should be immutable values.
        """
        new: History[E] = History(self._timeline)
        new._cursor = self._cursor
        return new

    def restart(self) -> None:
        """Rewind the cursor to the first event. Events are kept."""
        self._cursor = 0

    def add_event(self, event: E) -> None:
        self._timeline.append(event)

    def events(self) -> Iterator[E]:
        """
        Lazily yield the events from the cursor to the end.

        The cursor moves past an event when the consumer asks for the next
        one, so a consumer that stops early leaves the event it stopped on
        pending; the next events() call yields it again.
        """
        while self._cursor < len(self._timeline):
            yield self._timeline[self._cursor]
            self._cursor += 1

    # --------------------------------------------------
    # replay helpers（供 replay.advance_one 使用）
    # --------------------------------------------------
    def _peek(self) -> E:
        return self._timeline[self._cursor]

    def _step(self) -> None:
        self._cursor += 1
