#!filepath: eventsearch/history/runner.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Callable, Deque, Generic, Iterator, List, Optional, TypeVar

from eventsearch import logs
from eventsearch.history.history import History
from eventsearch.history.pair import Pair
from eventsearch.history.replay import Outcome, advance_one, align
from eventsearch.history.subject import Subject
from eventsearch.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from eventsearch.utils.errors import HistoryEndedError, NilSubjectError

E = TypeVar("E")
S = TypeVar("S", bound=Subject)


class TerminalStatus(str, Enum):
    DONE = "done"
    ERRORED = "errored"
    STARVED = "starved"  # no candidate events, no done / error signal

    @property
    def is_valid(self) -> bool:
        return self is TerminalStatus.DONE


@dataclass(frozen=True)
class Terminal(Generic[S]):
    """One subject that stopped, and why. depth = events on its path."""

    subject: S
    status: TerminalStatus
    depth: int


@dataclass
class SearchStats:
    enqueued: int = 0
    replayed_events: int = 0
    applied_events: int = 0
    done: int = 0
    errored: int = 0
    starved: int = 0

    @property
    def invalid(self) -> int:
        return self.errored + self.starved


class Runner(Generic[E, S]):
    """
    Runner = 基于事件重放的穷举回溯搜索

    流程（FIFO 队列，单线程，由消费者拉取驱动）：
      1. 出队 (history, subject)，subject 是全新实例
      2. align：把 history 重放到 subject 上，追到分支点
      3. 询问 next_events() = [c0, c1, ..., cn]
         - c1..cn：copy history + 追加 ci + restart，配新 subject 入队
         - c0：追加到当前 history，直接作用在当前 subject 上（原地继续，无重放成本）
      4. DONE 立即产出；ERRORED / STARVED 暂存，队列清空后统一产出

    设计铁律：
      - 分支永远 copy history，不共享存储
      - 消费者停止拉取时不再做任何重放
      - 不做环检测：状态机必须是有限深度的
    """

    def __init__(
        self,
        init_fn: Callable[[], S],
        inst: Instrumentation | NoOpInstrumentation | None = None,
        *,
        label: str = "search",
        log_stats: bool = True,
    ):
        if init_fn is None:
            raise NilSubjectError("Runner(init_fn=None)")

        self._init_fn = init_fn
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )
        self.label = label
        self.log_stats = log_stats
        self.stats = SearchStats()

    # --------------------------------------------------
    # public API
    # --------------------------------------------------
    def explore(self) -> Iterator[Terminal[S]]:
        """
        Lazily enumerate every terminal subject with its status.
        Valid (done) subjects come first, in discovery order;
        errored and starved ones follow once the queue is empty.
        """
        self.stats = SearchStats()
        invalid: List[Terminal[S]] = []
        queue: Deque[Pair[E]] = deque()

        queue.append(Pair.new(None, self._new_subject()))
        self.stats.enqueued += 1
        logs.debug(f"[Runner] {self.label} START")
        self.inst.progress.start(self.label)

        try:
            while queue:
                pair = queue.popleft()
                terminal = self._run_pair(pair, queue)

                if terminal.status is TerminalStatus.DONE:
                    self.inst.progress.update(self.label, self.stats.done, "terminals")
                    yield terminal
                else:
                    invalid.append(terminal)

            yield from invalid
        finally:
            self._finish()

    def __iter__(self) -> Iterator[S]:
        for terminal in self.explore():
            yield terminal.subject

    # --------------------------------------------------
    # internals
    # --------------------------------------------------
    def _new_subject(self) -> S:
        subject = self._init_fn()
        if subject is None or subject.is_nil():
            raise NilSubjectError("init_fn()")
        return subject

    def _run_pair(self, pair: Pair[E], queue: Deque[Pair[E]]) -> Terminal[S]:
        history, subject = pair.history, pair.subject

        before = history.cursor
        with self.inst.timer("replay"):
            outcome = align(history, subject)
        self.stats.replayed_events += history.cursor - before

        with self.inst.timer("extend"):
            while outcome is Outcome.CONTINUE:
                candidates = list(subject.next_events())

                if subject.has_error():
                    return self._terminal(subject, TerminalStatus.ERRORED, history)
                if not candidates:
                    return self._terminal(subject, TerminalStatus.STARVED, history)

                for event in candidates[1:]:
                    branch = history.copy()
                    branch.add_event(event)
                    branch.restart()

                    queue.append(Pair.new(branch, self._new_subject()))
                    self.stats.enqueued += 1

                history.add_event(candidates[0])
                outcome = advance_one(history, subject)

                if outcome is Outcome.REPLAY_EXHAUSTED:
                    raise HistoryEndedError(
                        f"history ended at cursor={history.cursor} len={len(history)}"
                    )
                self.stats.applied_events += 1

        if outcome is Outcome.ERRORED:
            return self._terminal(subject, TerminalStatus.ERRORED, history)
        return self._terminal(subject, TerminalStatus.DONE, history)

    def _terminal(self, subject: S, status: TerminalStatus, history: History[E]) -> Terminal[S]:
        if status is TerminalStatus.DONE:
            self.stats.done += 1
        elif status is TerminalStatus.ERRORED:
            self.stats.errored += 1
        else:
            self.stats.starved += 1

        return Terminal(subject=subject, status=status, depth=len(history))

    def _finish(self) -> None:
        for name, value in asdict(self.stats).items():
            self.inst.metrics.record(f"{self.label}.{name}", value)
        self.inst.progress.done(self.label, self.stats.done, "terminals")

        if self.log_stats:
            s = self.stats
            logs.info(
                f"[Runner] {self.label} DONE "
                f"done={s.done} errored={s.errored} starved={s.starved} "
                f"enqueued={s.enqueued} replayed={s.replayed_events} applied={s.applied_events}"
            )


def execute(
    init_fn: Callable[[], S],
    inst: Instrumentation | NoOpInstrumentation | None = None,
) -> Iterator[S]:
    """
    Lazy sequence of every subject that reached a terminal state.

    Done subjects first (as discovered), then errored / starved ones.
    Callers check has_error() per element; domain failures never raise.
    Precondition: init_fn returns a fresh, non-nil subject on every call.
    """
    return iter(Runner(init_fn, inst))
