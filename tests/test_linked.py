import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.linked import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_construct_from_items_keeps_order():
    lst = LinkedList(["Node 1", "Node 2", "Node 3"])
    assert list(lst) == ["Node 1", "Node 2", "Node 3"]
    assert len(lst) == 3


def test_add_front_prepends():
    lst = LinkedList(["b"])
    node = lst.add_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b"]
    assert node.next.content == "b"


def test_add_back_appends_and_updates_last():
    lst = LinkedList()
    first = lst.add_back(1)
    second = lst.add_back(2)
    assert lst.head is first
    assert lst.last() is second
    assert first.next is second
    assert second.next is None


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.add_front("only")
    assert lst.last() is node
    assert lst.head is node


def test_node_defaults():
    node = Node("x")
    assert node.content == "x"
    assert node.next is None


@given(st.lists(st.integers()))
def test_len_matches_items(items):
    lst = LinkedList(items)
    assert len(lst) == len(items)
    assert list(lst) == items


@given(st.lists(st.integers(), min_size=1))
def test_last_is_final_item(items):
    assert LinkedList(items).last().content == items[-1]


@given(st.lists(st.integers()))
def test_add_front_reverses(items):
    lst = LinkedList()
    for item in items:
        lst.add_front(item)
    assert list(lst) == items[::-1]


def test_clear_calls_delete_in_order_and_empties():
    deleted = []
    lst = LinkedList(["Node 1", "Node 2", "Node 3"])
    lst.clear(deleted.append)
    assert deleted == ["Node 1", "Node 2", "Node 3"]
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.add_back(3)
    assert list(lst) == [3]
    assert len(lst) == 1


def test_iterate_visits_each_content():
    seen = []
    LinkedList(["a", "b", "c"]).iterate(seen.append)
    assert seen == ["a", "b", "c"]


def test_iterate_on_empty_calls_nothing():
    seen = []
    LinkedList().iterate(seen.append)
    assert seen == []


@given(st.lists(st.text()))
def test_map_applies_function(items):
    source = LinkedList(items)
    mapped = source.map(str.upper)
    assert list(mapped) == [s.upper() for s in items]
    assert list(source) == items


def test_map_returns_independent_list():
    source = LinkedList([1, 2])
    mapped = source.map(lambda x: x * 10)
    mapped.add_back(99)
    assert list(source) == [1, 2]
    assert len(mapped) == 3


def test_map_failure_deletes_partial_result_and_raises():
    deleted = []

    def transform(value):
        return None if value == "stop" else value + "!"

    source = LinkedList(["a", "b", "stop", "c"])
    with pytest.raises(ValueError):
        source.map(transform, deleted.append)
    assert deleted == ["a!", "b!"]
    assert list(source) == ["a", "b", "stop", "c"]


def test_map_failure_without_delete_still_raises():
    with pytest.raises(ValueError):
        LinkedList([1]).map(lambda _: None)