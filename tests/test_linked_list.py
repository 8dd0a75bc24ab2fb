import pytest
from hypothesis import given, strategies as st

from ftlib.linked_list import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_init_from_items_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList(["b"])
    node = lst.push_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b"]


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back("x")
    assert lst.head is node
    assert lst.last() is node


def test_push_back_appends():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert list(lst) == [1, 2]


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "c"
    assert tail.next is None


def test_clear_calls_delete_for_each_content():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["x", "y"]).for_each(seen.append)
    assert seen == ["x", "y"]


def test_map_returns_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_for_each_propagates_errors():
    def boom(_):
        raise RuntimeError("stop")

    with pytest.raises(RuntimeError):
        LinkedList([1]).for_each(boom)


@given(st.lists(st.integers()))
def test_roundtrip_and_length(items):
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


@given(st.lists(st.integers()))
def test_push_front_reverses(items):
    lst = LinkedList()
    for item in items:
        lst.push_front(item)
    assert list(lst) == list(reversed(items))