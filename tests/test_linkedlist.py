import pytest

from booktracker.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert isinstance(node, Node) and node.content == 1
    assert list(lst) == [1, 2, 3]
    assert lst.head is node


def test_push_back_appends_and_updates_last():
    lst = LinkedList()
    lst.push_back("x")
    node = lst.push_back("y")
    assert lst.last() is node
    assert lst.last().next is None
    assert list(lst) == ["x", "y"]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("only")
    assert lst.last() is node
    lst.push_back("after")
    assert list(lst) == ["only", "after"]


def test_nodes_are_linked():
    lst = LinkedList([1, 2])
    assert lst.head.next is lst.last()


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete_and_reuse():
    lst = LinkedList(["a"])
    lst.clear()
    lst.push_back("b")
    assert list(lst) == ["b"]


def test_for_each_visits_all():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_of_empty():
    assert list(LinkedList().map(str)) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise ValueError("bad")
        return x

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [1, 2]


def test_len_matches_iteration():
    lst = LinkedList(range(5))
    lst.push_front(-1)
    assert len(lst) == len(list(lst))