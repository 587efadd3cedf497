#!filepath: tests/history/test_history.py
from eventsearch.history import History


def test_new_history_is_empty():
    h = History()

    assert len(h) == 0
    assert h.cursor == 0
    assert h.is_exhausted
    assert list(h.events()) == []


def test_history_from_events():
    h = History(["a", "b"])

    assert h.timeline == ("a", "b")
    assert h.cursor == 0
    assert h.remaining == 2


def test_add_event_appends_without_moving_cursor():
    h = History()
    h.add_event("a")
    h.add_event("b")

    assert h.timeline == ("a", "b")
    assert h.cursor == 0


def test_events_consumes_to_end():
    h = History(["a", "b", "c"])

    assert list(h.events()) == ["a", "b", "c"]
    assert h.cursor == 3
    assert h.is_exhausted
    # 已消费完：再次迭代为空
    assert list(h.events()) == []


def test_events_partial_consumption_keeps_stopping_point():
    """消费者中途 break：停下的那个事件保持待处理"""
    h = History(["a", "b", "c"])

    seen = []
    for e in h.events():
        seen.append(e)
        if e == "b":
            break

    assert seen == ["a", "b"]
    assert h.cursor == 1
    assert list(h.events()) == ["b", "c"]
    assert h.cursor == 3


def test_events_resumes_after_new_events():
    h = History(["a"])
    assert list(h.events()) == ["a"]

    h.add_event("b")
    assert list(h.events()) == ["b"]


def test_copy_then_restart_only_copy():
    """3 个事件，copy 后只 restart copy：原 cursor 不受影响"""
    h = History(["a", "b", "c"])
    list(h.events())

    c = h.copy()
    assert c.cursor == 3

    c.restart()

    assert h.cursor == 3
    assert c.cursor == 0
    assert c.timeline == h.timeline


def test_copy_does_not_alias_timeline():
    h = History(["a"])
    c = h.copy()

    c.add_event("x")
    h.add_event("y")

    assert h.timeline == ("a", "y")
    assert c.timeline == ("a", "x")


def test_sibling_copies_are_independent():
    parent = History(["a", "b"])
    left = parent.copy()
    right = parent.copy()

    left.add_event("L")
    list(left.events())

    assert right.timeline == ("a", "b")
    assert right.cursor == 0
    assert parent.timeline == ("a", "b")


def test_restart_is_idempotent():
    h = History(["a", "b"])
    list(h.events())

    h.restart()
    assert h.cursor == 0
    h.restart()
    assert h.cursor == 0
    assert list(h.events()) == ["a", "b"]


def test_timeline_view_is_read_only_copy():
    h = History(["a"])
    view = h.timeline

    h.add_event("b")

    assert view == ("a",)
    assert "cursor=0" in repr(h)
