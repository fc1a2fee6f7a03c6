import pytest

from pipex.linked import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_back_keeps_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.push_front(item)
    assert list(lst) == [3, 2, 1]
    assert lst.head.content == 3


def test_push_returns_node():
    lst = LinkedList()
    node = lst.push_back("x")
    assert isinstance(node, Node) and node.content == "x"
    assert lst.last() is node


def test_last_returns_final_node():
    lst = LinkedList([10, 20, 30])
    tail = lst.last()
    assert tail.content == 30
    assert tail.next is None


def test_mixed_pushes():
    lst = LinkedList([2])
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]


def test_clear_calls_delete_in_order():
    lst = LinkedList(["a", "b", "c"])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.for_each(seen.append)
    assert seen == [1, 2, 3]


def test_map_builds_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10, lambda x: None)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]
    assert mapped.last().next is None


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_produced_contents():
    lst = LinkedList([1, 2, 0, 4])
    deleted = []

    def invert(x):
        return 100 // x

    with pytest.raises(ZeroDivisionError):
        lst.map(invert, deleted.append)
    assert deleted == [100, 50]