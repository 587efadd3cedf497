#!filepath: eventsearch/observability/timeline_reporter.py
from typing import Any, Dict, Optional

from eventsearch import logs


class TimelineReporter:
    """
    搜索耗时报告：每个叶子的总耗时 / 进入次数 / 平均耗时，
    后面跟上 Runner 记录的计数器（done / errored / enqueued ...）。
    """

    def __init__(
        self,
        totals: Dict[str, float],
        calls: Dict[str, int],
        label: str,
        counters: Optional[Dict[str, Any]] = None,
    ):
        self.totals = totals
        self.calls = calls
        self.label = label
        self.counters = counters or {}

    def print(self):
        logs.info(f"[Timeline] ===== Search timeline for {self.label} =====")
        logs.info(f"[Timeline] {'leaf':<20} {'total':>10} {'calls':>8} {'avg':>12}")

        total = 0.0
        for name, sec in self.totals.items():
            n = self.calls.get(name, 0)
            avg_ms = sec / n * 1000 if n else 0.0
            logs.info(f"[Timeline] {name:<20} {sec:>9.3f}s {n:>8} {avg_ms:>10.3f}ms")
            total += sec

        logs.info(f"[Timeline] {'total':<20} {total:>9.3f}s")

        for name, value in self.counters.items():
            logs.info(f"[Timeline] {name:<30} {value}")

        logs.info("[Timeline] ===========================================")
