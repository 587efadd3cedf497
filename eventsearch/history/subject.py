#!filepath: eventsearch/history/subject.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

E = TypeVar("E")


class Subject(ABC, Generic[E]):
    """
    Subject（被搜索的状态机）契约

    设计铁律：
    - apply_event 必须是确定性的：同一事件序列作用在新实例上，
      必须得到完全相同的内部状态（重放正确性的唯一前提）
    - next_events 的顺序必须稳定：第 0 个候选原地继续，其余候选入队
    - 状态机深度必须有限，引擎不做环检测
    """

    def is_nil(self) -> bool:
        """Placeholder check; concrete subjects are never nil."""
        return False

    @abstractmethod
    def has_error(self) -> bool:
        """True once the subject has entered a permanent failure state."""
        raise NotImplementedError

    @abstractmethod
    def apply_event(self, event: E) -> bool:
        """
        Apply one event.

        Returns True iff the subject is now terminal (done).
        """
        raise NotImplementedError

    @abstractmethod
    def next_events(self) -> List[E]:
        """
        Candidate events from the current state, in a stable order.
        An empty list means no further event is possible.
        """
        raise NotImplementedError
