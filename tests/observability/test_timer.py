#!filepath: tests/observability/test_timer.py

import time
from eventsearch.observability.timer import Timer


def test_timer_basic():
    t = Timer(enabled=True)
    t.start("replay")
    time.sleep(0.01)
    elapsed = t.stop("replay")

    assert elapsed > 0
    assert isinstance(elapsed, float)
    assert t.calls["replay"] == 1
    assert t.totals["replay"] == elapsed


def test_timer_accumulates_repeated_leaf():
    t = Timer(enabled=True)

    laps = []
    for _ in range(3):
        t.start("extend")
        time.sleep(0.002)
        laps.append(t.stop("extend"))

    assert t.calls["extend"] == 3
    assert t.totals["extend"] == sum(laps)
    assert t.totals["extend"] > laps[0]
    assert t.mean("extend") > 0


def test_timer_unrecorded_scope_measures_only():
    t = Timer(enabled=True)
    t.start("search")
    elapsed = t.stop("search", record=False)

    assert elapsed >= 0
    assert "search" not in t.totals
    assert "search" not in t.calls


def test_timer_nested_same_name():
    t = Timer(enabled=True)
    t.start("x")
    t.start("x")
    t.stop("x")
    t.stop("x")

    assert t.calls["x"] == 2
    assert t.stop("x") == 0.0


def test_timer_unknown_name():
    t = Timer(enabled=True)

    assert t.stop("never_started") == 0.0
    assert t.mean("never_started") == 0.0


def test_timer_disabled():
    t = Timer(enabled=False)
    t.start("task")
    elapsed = t.stop("task")

    assert elapsed == 0.0
    assert t.totals == {}
