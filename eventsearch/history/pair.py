#!filepath: eventsearch/history/pair.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from eventsearch.history.history import History
from eventsearch.history.subject import Subject
from eventsearch.utils.errors import NilSubjectError

E = TypeVar("E")


@dataclass
class Pair(Generic[E]):
    """
    队列中的最小工作单元：一条 History + 一个全新的 Subject。
    两者都由 Pair 独占，出队后只被消费一次。
    """

    history: History[E]
    subject: Subject[E]

    @classmethod
    def new(cls, history: Optional[History[E]], subject: Optional[Subject[E]]) -> "Pair[E]":
        """
        Build a pair; a missing history becomes a new empty one.
        A nil subject fails fast.
        """
        if subject is None or subject.is_nil():
            raise NilSubjectError("Pair.new")

        if history is None:
            history = History()

        return cls(history=history, subject=subject)
