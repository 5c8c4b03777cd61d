import pytest

from dsakit.circular import CircularList

VALUES = [2, 3, 4, 5, 6]


def test_iteration_round_trip():
    assert list(CircularList(VALUES)) == VALUES


def test_length():
    assert len(CircularList(VALUES)) == len(VALUES)
    assert len(CircularList()) == 0


def test_last_node_links_back_to_head():
    circle = CircularList(VALUES)
    tail = circle._tail()
    assert tail.next is circle.head


def test_display_joins_with_spaces():
    assert CircularList(VALUES).display() == " ".join(str(v) for v in VALUES)


def test_insert_at_front_becomes_head():
    circle = CircularList(VALUES)
    circle.insert(0, 9)
    assert list(circle) == [9] + VALUES
    assert circle._tail().next is circle.head


def test_insert_at_end_appends():
    circle = CircularList(VALUES)
    circle.insert(len(VALUES), 7)
    assert list(circle) == VALUES + [7]
    assert circle._tail().next is circle.head


def test_insert_in_middle():
    circle = CircularList(VALUES)
    circle.insert(2, 99)
    assert list(circle) == VALUES[:2] + [99] + VALUES[2:]


def test_insert_into_empty():
    circle = CircularList()
    circle.insert(0, 1)
    assert list(circle) == [1]
    assert circle.head.next is circle.head


@pytest.mark.parametrize("index", [-1, 6])
def test_insert_out_of_range(index):
    circle = CircularList(VALUES)
    with pytest.raises(IndexError):
        circle.insert(index, 1)
    assert list(circle) == VALUES


def test_delete_head():
    circle = CircularList(VALUES)
    assert circle.delete(1) == VALUES[0]
    assert list(circle) == VALUES[1:]
    assert circle._tail().next is circle.head


@pytest.mark.parametrize("index", [2, 3, 5])
def test_delete_inner(index):
    circle = CircularList(VALUES)
    assert circle.delete(index) == VALUES[index - 1]
    expected = VALUES[: index - 1] + VALUES[index:]
    assert list(circle) == expected


def test_delete_only_node_empties_list():
    circle = CircularList([4])
    assert circle.delete(1) == 4
    assert len(circle) == 0
    assert circle.head is None


@pytest.mark.parametrize("index", [0, 6, 8])
def test_delete_out_of_range(index):
    circle = CircularList(VALUES)
    with pytest.raises(IndexError):
        circle.delete(index)
    assert list(circle) == VALUES


def test_delete_from_empty():
    with pytest.raises(IndexError):
        CircularList().delete(1)