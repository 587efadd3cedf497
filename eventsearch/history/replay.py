#!filepath: eventsearch/history/replay.py
from __future__ import annotations

from enum import Enum
from typing import TypeVar

from eventsearch.history.history import History
from eventsearch.history.subject import Subject

E = TypeVar("E")


class Outcome(str, Enum):
    """
    单步重放的结果（封闭枚举）。

    CONTINUE         : 事件已应用，subject 仍然存活
    DONE             : subject 到达终态（成功）
    ERRORED          : subject 进入永久错误态
    REPLAY_EXHAUSTED : cursor 已到 timeline 末尾，没有事件可应用
    """

    CONTINUE = "continue"
    DONE = "done"
    ERRORED = "errored"
    REPLAY_EXHAUSTED = "replay_exhausted"

    @property
    def is_terminal(self) -> bool:
        return self in (Outcome.DONE, Outcome.ERRORED)


def advance_one(history: History[E], subject: Subject[E]) -> Outcome:
    """
    Apply exactly one recorded event (timeline[cursor]) and move the cursor.

    Error is checked before done: a subject that reports done and error on
    the same event is ERRORED.
    """
    if history.is_exhausted:
        return Outcome.REPLAY_EXHAUSTED

    event = history._peek()
    history._step()

    is_done = subject.apply_event(event)
    if subject.has_error():
        return Outcome.ERRORED
    if is_done:
        return Outcome.DONE

    return Outcome.CONTINUE


def align(history: History[E], subject: Subject[E]) -> Outcome:
    """
    Replay every remaining event of `history` onto `subject`.

    Returns CONTINUE once the subject has caught up with the recorded path,
    or stops early on DONE / ERRORED.
    """
    while not history.is_exhausted:
        outcome = advance_one(history, subject)
        if outcome is not Outcome.CONTINUE:
            return outcome

    return Outcome.CONTINUE
