import pytest

from biblioteca.cursorlist import CursorList


def test_empty_navigation_returns_none():
    cl = CursorList()
    assert cl.first() is None
    assert cl.last() is None
    assert cl.next() is None
    assert cl.prev() is None
    assert len(cl) == 0


def test_push_back_keeps_order():
    cl = CursorList()
    for value in ("a", "b", "c"):
        cl.push_back(value)
    assert list(cl) == ["a", "b", "c"]


def test_push_front_reverses_order():
    cl = CursorList()
    for value in ("a", "b", "c"):
        cl.push_front(value)
    assert list(cl) == ["c", "b", "a"]


def test_forward_and_backward_walk():
    cl = CursorList(["a", "b", "c"])
    assert cl.first() == "a"
    assert cl.next() == "b"
    assert cl.next() == "c"
    assert cl.next() is None
    assert cl.prev() == "b"
    assert cl.prev() == "a"
    assert cl.prev() is None
    assert cl.last() == "c"


def test_push_front_keeps_cursor_on_same_element():
    cl = CursorList(["a", "b"])
    cl.first()
    cl.push_front("z")
    assert cl.next() == "b"


def test_push_current_inserts_after_cursor():
    cl = CursorList(["a", "c"])
    cl.first()
    cl.push_current("b")
    assert list(cl) == ["a", "b", "c"]
    assert cl.next() == "b"


def test_push_current_without_cursor_raises():
    cl = CursorList(["a"])
    with pytest.raises(IndexError):
        cl.push_current("b")


def test_pop_front_and_back():
    cl = CursorList(["a", "b", "c"])
    assert cl.pop_front() == "a"
    assert cl.pop_back() == "c"
    assert list(cl) == ["b"]
    assert cl.pop_back() == "b"
    assert cl.pop_front() is None
    assert len(cl) == 0


def test_pop_current_moves_cursor_back():
    cl = CursorList(["a", "b", "c"])
    cl.first()
    cl.next()
    assert cl.pop_current() == "b"
    assert list(cl) == ["a", "c"]
    assert cl.next() == "c"


def test_pop_current_at_head_clears_cursor():
    cl = CursorList(["a", "b"])
    cl.first()
    assert cl.pop_current() == "a"
    assert cl.next() is None
    assert cl.pop_current() is None
    assert list(cl) == ["b"]


def test_clear_empties_list():
    cl = CursorList([1, 2, 3])
    cl.first()
    cl.clear()
    assert len(cl) == 0
    assert cl.first() is None


def test_iteration_does_not_move_cursor():
    cl = CursorList([1, 2, 3])
    cl.first()
    assert list(cl) == [1, 2, 3]
    assert cl.next() == 2