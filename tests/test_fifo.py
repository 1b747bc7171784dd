import pytest

from paintcore.fifo import Fifo


def test_empty_fifo():
    q = Fifo()
    assert len(q) == 0
    assert q.peek_first() is None
    assert q.peek_last() is None


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Fifo().pop()


def test_fifo_order():
    q = Fifo()
    for item in ["a", "b", "c"]:
        q.push(item)
    assert [q.pop(), q.pop(), q.pop()] == ["a", "b", "c"]
    assert len(q) == 0


def test_peek_does_not_remove():
    q = Fifo()
    q.push(1)
    q.push(2)
    assert q.peek_first() == 1
    assert q.peek_last() == 2
    assert len(q) == 2


def test_len_tracks_push_and_pop():
    q = Fifo()
    q.push("x")
    q.push("y")
    assert len(q) == 2
    q.pop()
    assert len(q) == 1


def test_peek_after_draining():
    q = Fifo()
    q.push("only")
    assert q.pop() == "only"
    assert q.peek_first() is None
    assert q.peek_last() is None
    q.push("again")
    assert q.peek_first() == "again"
    assert q.peek_last() == "again"


def test_clear_calls_free_fn_in_order():
    q = Fifo()
    for item in [3, 1, 2]:
        q.push(item)
    freed = []
    q.clear(freed.append)
    assert freed == [3, 1, 2]
    assert len(q) == 0


def test_clear_without_free_fn():
    q = Fifo()
    q.push(object())
    q.clear()
    assert len(q) == 0