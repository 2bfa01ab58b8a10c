import pytest

from tda.errors import DuplicateError, EmptyError, NotFoundError
from tda.linked_list import LinkedList


def by_dni(person):
    return person[0]


def test_insert_sorted_orders_items():
    data = [5, 3, 9, 1, 7]
    lst = LinkedList()
    for x in data:
        lst.insert_sorted(x)
    assert list(lst) == sorted(data)
    assert len(lst) == len(data)


def test_insert_sorted_rejects_duplicate():
    lst = LinkedList()
    lst.insert_sorted(4)
    lst.insert_sorted(2)
    with pytest.raises(DuplicateError):
        lst.insert_sorted(4)
    assert list(lst) == [2, 4]


def test_insert_sorted_with_duplicates_goes_before_equal():
    lst = LinkedList(key=by_dni)
    lst.insert_sorted((11222333, "Juan Perez"), allow_duplicates=True)
    lst.insert_sorted((11222333, "Juana Perez"), allow_duplicates=True)
    assert list(lst) == [(11222333, "Juana Perez"), (11222333, "Juan Perez")]


def test_insert_first_and_last():
    lst = LinkedList()
    lst.insert_last(2)
    lst.insert_first(1)
    lst.insert_last(3)
    assert list(lst) == [1, 2, 3]
    assert lst.first() == 1
    assert lst.last() == 3


def test_insert_at_positions():
    lst = LinkedList([1, 2, 3])
    lst.insert_at(9, 1)
    assert lst.first() == 9
    lst.insert_at(8, len(lst) + 1)
    assert lst.last() == 8
    lst.insert_at(7, 3)
    assert lst.get_at(3) == 7
    with pytest.raises(NotFoundError):
        lst.insert_at(6, len(lst) + 2)


def test_find_sorted_returns_stored_item():
    lst = LinkedList(key=by_dni)
    lst.insert_sorted((44555666, "Juana Perez"))
    lst.insert_sorted((11222333, "Juan Perez"))
    assert lst.find_sorted((44555666, "")) == (44555666, "Juana Perez")
    with pytest.raises(NotFoundError):
        lst.find_sorted((55666777, ""))
    with pytest.raises(NotFoundError):
        lst.find_sorted((1, ""))


def test_find_unsorted():
    lst = LinkedList([3, 1, 2])
    assert lst.find(1) == 1
    with pytest.raises(NotFoundError):
        lst.find(5)


def test_get_at_range():
    data = ["a", "b", "c"]
    lst = LinkedList(data)
    assert [lst.get_at(i) for i in range(1, len(data) + 1)] == data
    for bad in (0, -1, len(data) + 1):
        with pytest.raises(NotFoundError):
            lst.get_at(bad)


def test_empty_list_errors():
    lst = LinkedList()
    assert not lst
    for call in (lst.first, lst.last, lst.remove_first, lst.remove_last):
        with pytest.raises(EmptyError):
            call()
    with pytest.raises(NotFoundError):
        lst.get_at(1)


def test_remove_sorted_and_remove():
    lst = LinkedList([1, 3, 5, 7])
    assert lst.remove_sorted(5) == 5
    assert list(lst) == [1, 3, 7]
    with pytest.raises(NotFoundError):
        lst.remove_sorted(4)
    assert lst.remove(1) == 1
    assert list(lst) == [3, 7]
    with pytest.raises(NotFoundError):
        lst.remove(1)


def test_remove_first_last_and_at():
    lst = LinkedList([1, 2, 3, 4])
    assert lst.remove_first() == 1
    assert lst.remove_last() == 4
    assert lst.remove_at(2) == 3
    assert list(lst) == [2]
    with pytest.raises(NotFoundError):
        lst.remove_at(2)
    assert lst.remove_at(1) == 2
    assert len(lst) == 0


def test_remove_duplicates_sorted():
    data = [1, 1, 2, 3, 3, 3]
    lst = LinkedList(data)
    removed = lst.remove_duplicates_sorted()
    assert list(lst) == sorted(set(data))
    assert removed == len(data) - len(set(data))
    assert len(lst) == len(set(data))


def test_remove_duplicates_keeps_first_occurrences():
    data = [3, 1, 3, 2, 1, 3]
    lst = LinkedList(data)
    removed = lst.remove_duplicates()
    assert list(lst) == list(dict.fromkeys(data))
    assert removed == len(data) - len(set(data))


def test_sort_is_stable_with_key():
    people = [(2, "b"), (1, "x"), (2, "a"), (1, "y")]
    lst = LinkedList(people, key=by_dni)
    lst.sort()
    assert list(lst) == sorted(people, key=by_dni)
    assert len(lst) == len(people)


def test_clear_and_for_each():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.for_each(seen.append)
    assert seen == [1, 2, 3]
    lst.clear()
    assert list(lst) == []
    assert len(lst) == 0


def test_cursor_walks_list():
    data = [10, 20, 30]
    cursor = LinkedList(data).cursor()
    assert cursor.at_end()
    walked = [cursor.first()]
    while cursor.has_next():
        walked.append(cursor.next())
    assert walked == data
    with pytest.raises(NotFoundError):
        cursor.next()
    assert cursor.at_end()


def test_cursor_on_empty_list():
    cursor = LinkedList().cursor()
    with pytest.raises(EmptyError):
        cursor.first()
    assert cursor.has_next() is False
    with pytest.raises(NotFoundError):
        cursor.next()