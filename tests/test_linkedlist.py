import pytest

from ftkit.linkedlist import LinkedList, Node


def numeric(a, b):
    return a - b


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items
    assert len(LinkedList(items)) == len(items)


def test_empty_list():
    ll = LinkedList()
    assert len(ll) == 0
    assert list(ll) == []


def test_add_prepends():
    ll = LinkedList([2, 3])
    ll.add(1)
    assert list(ll) == [1, 2, 3]
    assert len(ll) == 3


def test_push_appends():
    ll = LinkedList()
    ll.push("x")
    ll.push("y")
    assert list(ll) == ["x", "y"]


def test_pop_returns_first():
    ll = LinkedList(["first", "second"])
    assert ll.pop() == "first"
    assert list(ll) == ["second"]
    assert len(ll) == 1


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop()


def test_at():
    ll = LinkedList(["a", "b", "c"])
    assert ll.at(0) == "a"
    assert ll.at(2) == "c"


@pytest.mark.parametrize("index", [3, -1, 10])
def test_at_out_of_range(index):
    with pytest.raises(IndexError):
        LinkedList(["a", "b", "c"]).at(index)


def test_reverse():
    ll = LinkedList([1, 2, 3, 4])
    ll.reverse()
    assert list(ll) == [4, 3, 2, 1]
    ll.reverse()
    assert list(ll) == [1, 2, 3, 4]


def test_reverse_single_and_empty():
    single = LinkedList(["only"])
    single.reverse()
    assert list(single) == ["only"]
    empty = LinkedList()
    empty.reverse()
    assert list(empty) == []


def test_sort_ascending():
    data = [5, 3, 9, 1, 4, 1]
    ll = LinkedList(data)
    ll.sort(numeric)
    assert list(ll) == sorted(data)
    assert len(ll) == len(data)


def test_sort_descending():
    data = [2, 7, 1, 8]
    ll = LinkedList(data)
    ll.sort(lambda a, b: b - a)
    assert list(ll) == sorted(data, reverse=True)


def test_sort_is_stable():
    data = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]
    ll = LinkedList(data)
    ll.sort(lambda a, b: a[0] - b[0])
    assert list(ll) == sorted(data, key=lambda pair: pair[0])


def test_sort_keeps_list_usable():
    ll = LinkedList([3, 1, 2])
    ll.sort(numeric)
    ll.push(0)
    assert ll.at(3) == 0
    assert ll.pop() == 1


def test_swap_with_next_head():
    ll = LinkedList(["a", "b", "c"])
    ll.swap_with_next(0)
    assert list(ll) == ["b", "a", "c"]


def test_swap_with_next_middle():
    ll = LinkedList(["a", "b", "c"])
    ll.swap_with_next(1)
    assert list(ll) == ["a", "c", "b"]


def test_swap_with_next_last_raises():
    ll = LinkedList(["a", "b"])
    with pytest.raises(IndexError):
        ll.swap_with_next(1)
    assert list(ll) == ["a", "b"]


def test_copy_is_independent():
    inner = [1, 2]
    ll = LinkedList([inner, "s"])
    dup = ll.copy()
    assert list(dup) == list(ll)
    dup.push("extra")
    dup.at(0).append(3)
    assert len(ll) == 2
    assert inner == [1, 2]


def test_map():
    ll = LinkedList(["a", "b"])
    mapped = ll.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(ll) == ["a", "b"]


def test_for_each_visits_from_last():
    seen = []
    LinkedList([1, 2, 3]).for_each(seen.append)
    assert seen == [3, 2, 1]


def test_clear():
    ll = LinkedList([1, 2, 3])
    ll.clear()
    assert len(ll) == 0
    assert list(ll) == []
    ll.push(4)
    assert list(ll) == [4]


def test_node_links():
    tail = Node("tail")
    head = Node("head", tail)
    assert head.next is tail
    assert tail.next is None
    assert head.content == "head"