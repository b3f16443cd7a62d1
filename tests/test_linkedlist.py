import random

import pytest

from kernlib.linkedlist import LinkedList, ListNode


def by_key(a, b):
    return a[0] < b[0]


def test_construction_and_iteration():
    items = [3, 1, 4, 1, 5]
    lst = LinkedList(items)
    assert list(lst) == items
    assert list(reversed(lst)) == items[::-1]
    assert len(lst) == len(items)
    assert bool(lst) is True


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert bool(lst) is False
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.front()
    with pytest.raises(IndexError):
        lst.back()
    with pytest.raises(IndexError):
        lst.pop_front()
    with pytest.raises(IndexError):
        lst.pop_back()


def test_push_and_pop():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert lst.front() == 1
    assert lst.back() == 3
    assert lst.pop_front() == 1
    assert lst.pop_back() == 3
    assert list(lst) == [2]
    assert len(lst) == 1


def test_insert_before_node_and_at_end():
    lst = LinkedList(["a", "c"])
    node_c = list(lst.nodes())[1]
    node_b = lst.insert(node_c, "b")
    lst.insert(None, "d")
    assert list(lst) == ["a", "b", "c", "d"]
    assert isinstance(node_b, ListNode) and node_b.value == "b"


def test_insert_with_foreign_node_rejected():
    a = LinkedList([1])
    b = LinkedList([2])
    foreign = next(b.nodes())
    with pytest.raises(ValueError):
        a.insert(foreign, 0)


def test_remove_returns_value_and_detaches():
    lst = LinkedList([1, 2, 3])
    middle = list(lst.nodes())[1]
    assert lst.remove(middle) == 2
    assert list(lst) == [1, 3]
    assert len(lst) == 2
    with pytest.raises(ValueError):
        lst.remove(middle)


def test_remove_while_iterating_nodes():
    lst = LinkedList(range(10))
    for node in lst.nodes():
        if node.value % 2:
            lst.remove(node)
    assert list(lst) == [v for v in range(10) if v % 2 == 0]


def test_splice_within_list():
    lst = LinkedList([1, 2, 3, 4, 5])
    nodes = list(lst.nodes())
    lst.splice(nodes[0], nodes[3], None)
    assert list(lst) == [4, 5, 1, 2, 3]
    assert len(lst) == 5


def test_splice_between_lists_keeps_nodes():
    a = LinkedList([1, 2])
    b = LinkedList([10, 20, 30])
    b_nodes = list(b.nodes())
    a.splice(None, b_nodes[0], b_nodes[2])
    assert list(a) == [1, 2, 10, 20]
    assert list(b) == [30]
    assert len(a) == 4 and len(b) == 1
    assert a.remove(b_nodes[1]) == 20


def test_splice_empty_range_is_noop():
    lst = LinkedList([1, 2, 3])
    node = list(lst.nodes())[1]
    lst.splice(None, node, node)
    assert list(lst) == [1, 2, 3]


def test_splice_before_inside_range_rejected():
    lst = LinkedList([1, 2, 3, 4])
    nodes = list(lst.nodes())
    with pytest.raises(ValueError):
        lst.splice(nodes[1], nodes[0], nodes[3])
    assert list(lst) == [1, 2, 3, 4]


def test_reverse():
    items = list(range(7))
    lst = LinkedList(items)
    lst.reverse()
    assert list(lst) == items[::-1]
    assert list(reversed(lst)) == items
    lst.push_back(99)
    assert lst.back() == 99


def test_sort_matches_sorted():
    rng = random.Random(7)
    items = [rng.randrange(50) for _ in range(200)]
    lst = LinkedList(items)
    lst.sort()
    assert list(lst) == sorted(items)
    assert len(lst) == len(items)


def test_sort_is_stable_with_custom_less():
    rng = random.Random(3)
    items = [(rng.randrange(5), i) for i in range(60)]
    lst = LinkedList(items)
    lst.sort(by_key)
    assert list(lst) == sorted(items, key=lambda p: p[0])


def test_sort_keeps_node_identity():
    lst = LinkedList([3, 1, 2])
    nodes = {node.value: node for node in lst.nodes()}
    lst.sort()
    assert [id(n) for n in lst.nodes()] == [id(nodes[v]) for v in (1, 2, 3)]


def test_insert_ordered_keeps_sorted_and_goes_after_equals():
    lst = LinkedList()
    values = [(5, "a"), (1, "b"), (3, "c"), (3, "d"), (9, "e"), (1, "f")]
    for value in values:
        lst.insert_ordered(value, by_key)
    assert list(lst) == sorted(values, key=lambda p: p[0])


def test_unique_removes_adjacent_duplicates():
    lst = LinkedList([1, 1, 2, 2, 2, 3, 1])
    dups = LinkedList()
    lst.unique(duplicates=dups)
    assert list(lst) == [1, 2, 3, 1]
    assert list(dups) == [1, 2, 2]
    assert len(lst) + len(dups) == 7


def test_unique_without_duplicates_list():
    lst = LinkedList([(1, "x"), (1, "y"), (2, "z")])
    lst.unique(by_key)
    assert list(lst) == [(1, "x"), (2, "z")]


def test_max_and_min_return_earliest_among_equals():
    items = [(2, "a"), (7, "b"), (7, "c"), (0, "d"), (0, "e")]
    lst = LinkedList(items)
    assert lst.max(by_key) == (7, "b")
    assert lst.min(by_key) == (0, "d")
    assert LinkedList([4, 8, 1]).max() == 8
    assert LinkedList([4, 8, 1]).min() == 1


def test_max_min_of_empty_raise():
    with pytest.raises(ValueError):
        LinkedList().max()
    with pytest.raises(ValueError):
        LinkedList().min()