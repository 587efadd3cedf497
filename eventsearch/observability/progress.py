#!filepath: eventsearch/observability/progress.py
from eventsearch import logs


class ProgressReporter:
    """
    最轻量进度系统：搜索没有已知总量，只报告已发现的终态数量。
    """

    def __init__(self, enabled: bool = True, every: int = 1000):
        self.enabled = enabled
        self.every = every

    def start(self, task: str):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} started")

    def update(self, task: str, current: int, unit: str = ""):
        if not self.enabled or self.every <= 0:
            return
        if current % self.every == 0:
            logs.info(f"[Progress] {task}: {current} {unit}")

    def done(self, task: str, total: int, unit: str = ""):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} done total={total} {unit}")
