import pytest

from fdfview.linkedlist import LinkedList, Node


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert items.last() is None
    assert list(items) == []


def test_add_back_keeps_order():
    items = LinkedList()
    for word in ("a", "b", "c"):
        items.add_back(word)
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_add_front_reverses_order():
    items = LinkedList()
    for word in ("a", "b", "c"):
        items.add_front(word)
    assert list(items) == ["c", "b", "a"]


def test_constructor_from_iterable():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_last_returns_tail_node():
    items = LinkedList(["x", "y"])
    tail = items.last()
    assert isinstance(tail, Node)
    assert tail.content == "y"
    assert tail.next is None


def test_add_back_returns_new_tail():
    items = LinkedList([1])
    node = items.add_back(2)
    assert items.last() is node


def test_iterate_visits_every_content():
    seen = []
    LinkedList(["p", "q"]).iterate(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    items = LinkedList(["a", "bb"])
    mapped = items.map(str.upper, None)
    assert list(mapped) == ["A", "BB"]
    assert list(items) == ["a", "bb"]
    assert mapped.head is not items.head


def test_map_failure_releases_partial_result():
    released = []

    def func(value):
        if value == "boom":
            raise RuntimeError("failed")
        return value * 2

    items = LinkedList(["a", "b", "boom"])
    with pytest.raises(RuntimeError):
        items.map(func, released.append)
    assert released == ["aa", "bb"]


def test_clear_calls_delete_and_empties():
    released = []
    items = LinkedList(["a", "b"])
    items.clear(released.append)
    assert released == ["a", "b"]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_delete():
    items = LinkedList([1, 2])
    items.clear(None)
    assert list(items) == []


def test_len_matches_iteration():
    items = LinkedList(range(5))
    items.add_front(-1)
    assert len(items) == len(list(items))