#!filepath: eventsearch/observability/timer.py
import time
from collections import OrderedDict
from typing import Dict, List


class Timer:
    """
    叶子计时累加器

    搜索里同一个叶子（replay / extend）每个 pair 都会进入一次，
    所以按名字累加总耗时和进入次数，而不是只保留最后一次。
    同名嵌套时按栈配对。
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._open: Dict[str, List[float]] = {}
        self.totals: Dict[str, float] = OrderedDict()
        self.calls: Dict[str, int] = {}

    def start(self, name: str) -> None:
        if not self.enabled:
            return
        self._open.setdefault(name, []).append(time.perf_counter())

    def stop(self, name: str, *, record: bool = True) -> float:
        """
        结束最近一次 start(name)，返回本次耗时。
        record=False 只测量，不计入 totals / calls。
        """
        if not self.enabled:
            return 0.0

        stack = self._open.get(name)
        if not stack:
            return 0.0

        elapsed = time.perf_counter() - stack.pop()
        if not stack:
            del self._open[name]

        if record:
            self.totals[name] = self.totals.get(name, 0.0) + elapsed
            self.calls[name] = self.calls.get(name, 0) + 1

        return elapsed

    def mean(self, name: str) -> float:
        n = self.calls.get(name, 0)
        return self.totals.get(name, 0.0) / n if n else 0.0
