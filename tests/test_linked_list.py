import pytest

from algokit.linked_list import LinkedList


def test_display_format():
    assert str(LinkedList([1, 2, 3, 4, 5])) == "1->2->3->4->5->"


def test_iteration_round_trip():
    values = [4, 8, 15, 16, 23, 42]
    assert list(LinkedList(values)) == values


def test_concatenate_source_lists():
    first = LinkedList([1, 2, 3, 4, 5])
    second = LinkedList([6, 7, 8, 9, 10])
    first.concatenate(second)
    assert list(first) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert list(second) == []


def test_concatenate_onto_empty():
    first = LinkedList()
    first.concatenate(LinkedList([1, 2]))
    assert list(first) == [1, 2]
    assert str(LinkedList()) == ""


def test_concatenate_with_itself_rejected():
    items = LinkedList([1])
    with pytest.raises(ValueError):
        items.concatenate(items)