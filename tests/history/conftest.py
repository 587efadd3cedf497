# tests/history/conftest.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pytest

from eventsearch.history import Subject


class BinarySubject(Subject[int]):
    """
    每一步可选 0 / 1，走满 depth 步即终态。
    终态共 2**depth 个，path 即完整事件序列。
    """

    def __init__(self, depth: int):
        self.depth = depth
        self.path: List[int] = []

    def has_error(self) -> bool:
        return False

    def apply_event(self, event: int) -> bool:
        self.path.append(event)
        return len(self.path) == self.depth

    def next_events(self) -> List[int]:
        return [0, 1]


class TreeSubject(Subject[str]):
    """
    由一棵显式的树驱动：
      tree[path]   → 该节点的候选事件（缺省 = 无候选，即 starvation）
      done         → 到达即成功终态的 path
      errors       → apply 后进入错误态的 path
      bad_nexts    → next_events() 时进入错误态的 path
    """

    def __init__(
        self,
        tree: Dict[Tuple[str, ...], List[str]],
        done=(),
        errors=(),
        bad_nexts=(),
    ):
        self.tree = tree
        self.done = set(done)
        self.errors = set(errors)
        self.bad_nexts = set(bad_nexts)
        self.path: Tuple[str, ...] = ()
        self.err: Optional[str] = None

    def has_error(self) -> bool:
        return self.err is not None

    def apply_event(self, event: str) -> bool:
        self.path = self.path + (event,)
        if self.path in self.errors:
            self.err = f"bad path {self.path}"
        return self.path in self.done

    def next_events(self) -> List[str]:
        if self.path in self.bad_nexts:
            self.err = f"bad next at {self.path}"
        return list(self.tree.get(self.path, []))


class NilSubject(BinarySubject):
    def is_nil(self) -> bool:
        return True


@pytest.fixture
def binary_factory():
    """
    返回 (init_fn, calls)：calls["n"] 记录 init_fn 被调用的次数。
    """

    def _make(depth: int):
        calls = {"n": 0}

        def init_fn():
            calls["n"] += 1
            return BinarySubject(depth)

        return init_fn, calls

    return _make


@pytest.fixture
def sample_tree():
    """
          ()
        / | \\
       a  b  c
      / \\     \\
     a1  a2    c1
    - a1, a2, b 为成功终态
    - c 的子节点 c1 没有后续事件（starvation）
    """
    return {
        (): ["a", "b", "c"],
        ("a",): ["a1", "a2"],
        ("c",): ["c1"],
    }


@pytest.fixture
def tree_factory():
    def _make(tree, **kwargs):
        calls = {"n": 0}

        def init_fn():
            calls["n"] += 1
            return TreeSubject(tree, **kwargs)

        return init_fn, calls

    return _make


@pytest.fixture
def binary_cls():
    return BinarySubject


@pytest.fixture
def nil_cls():
    return NilSubject
