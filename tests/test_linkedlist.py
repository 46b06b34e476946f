import pytest

from pipex.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_preserves_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_add_front_and_back():
    lst = LinkedList()
    lst.add_back(2)
    lst.add_front(1)
    lst.add_back(3)
    assert list(lst) == [1, 2, 3]


def test_add_returns_node():
    lst = LinkedList()
    node = lst.add_back("x")
    assert isinstance(node, Node) and node.content == "x"
    assert lst.head is node


def test_last_returns_tail_node():
    lst = LinkedList([1, 2, 3])
    tail = lst.last()
    assert tail.content == 3
    assert tail.next is None


def test_clear_calls_delete_on_contents():
    deleted = []
    lst = LinkedList(["a", None, "b"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_in_order():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    src = LinkedList([1, 2, 3])
    mapped = src.map(lambda x: x * 10)
    assert list(mapped) == [x * 10 for x in src]
    assert list(src) == [1, 2, 3]
    assert mapped is not src


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(func, deleted.append)
    assert deleted == [1, 2]


def test_len_matches_iteration():
    lst = LinkedList(range(7))
    assert len(lst) == len(list(lst))