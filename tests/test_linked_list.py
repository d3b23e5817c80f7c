import pytest

from dskit.linked_list import LinkedList


def test_size():
    lst = LinkedList()
    assert len(lst) == 0
    lst.push_front(1)
    assert len(lst) == 1


def test_init_from_values_keeps_order():
    lst = LinkedList([3, 1, 2])
    assert list(lst) == [3, 1, 2]
    assert len(lst) == 3


def test_push_front():
    lst = LinkedList()
    lst.push_front(5)
    assert len(lst) == 1
    lst.push_front(8)
    lst.push_front(12)
    assert len(lst) == 3
    assert list(lst) == [12, 8, 5]


def test_empty():
    lst = LinkedList()
    assert lst.is_empty()
    lst.push_front(1)
    assert not lst.is_empty()


def test_value_at():
    lst = LinkedList()
    lst.push_front(7)
    assert lst.value_at(0) == 7


def test_value_at_out_of_range():
    lst = LinkedList([1])
    with pytest.raises(IndexError):
        lst.value_at(1)
    with pytest.raises(IndexError):
        lst.value_at(-1)


def test_pop_front():
    lst = LinkedList()
    lst.push_front(9)
    lst.push_front(25)
    assert lst.pop_front() == 25
    assert lst.pop_front() == 9
    assert lst.is_empty()


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_push_back():
    lst = LinkedList()
    lst.push_back(99)
    assert lst.value_at(0) == 99
    lst.push_back(88)
    assert lst.value_at(1) == 88


def test_pop_back():
    lst = LinkedList()
    lst.push_back(122)
    assert lst.pop_back() == 122
    lst.push_back(564)
    lst.push_back(72)
    assert lst.pop_back() == 72
    assert lst.pop_back() == 564
    assert len(lst) == 0


def test_pop_back_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_back()


def test_front():
    lst = LinkedList()
    lst.push_front(7)
    assert lst.front() == 7
    lst.push_front(6)
    assert lst.front() == 6


def test_back():
    lst = LinkedList()
    lst.push_back(77)
    assert lst.back() == 77
    lst.push_back(42)
    assert lst.back() == 42
    lst.pop_back()
    assert lst.back() == 77


def test_front_and_back_of_empty_raise():
    lst = LinkedList()
    with pytest.raises(IndexError):
        lst.front()
    with pytest.raises(IndexError):
        lst.back()


def test_insert():
    lst = LinkedList()
    lst.insert(0, 5)
    lst.insert(0, 3)
    lst.insert(1, 4)
    lst.insert(3, 6)
    assert lst.value_at(0) == 3
    assert lst.value_at(1) == 4
    assert lst.value_at(2) == 5
    assert lst.value_at(3) == 6


def test_insert_out_of_bounds():
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.insert(3, 9)
    with pytest.raises(IndexError):
        lst.insert(-1, 9)
    assert list(lst) == [1, 2]


def test_erase():
    lst = LinkedList()
    lst.push_back(1)
    lst.push_back(2)
    lst.push_back(3)
    lst.erase(0)
    assert lst.value_at(0) == 2
    assert len(lst) == 2
    lst.erase(1)
    assert lst.value_at(0) == 2
    assert len(lst) == 1
    lst.erase(0)
    assert len(lst) == 0


def test_erase_errors():
    with pytest.raises(IndexError):
        LinkedList().erase(0)
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.erase(2)


def test_value_n_from_end():
    lst = LinkedList()
    lst.push_back(7)
    assert lst.value_n_from_end(1) == 7
    lst.push_back(8)
    assert lst.value_n_from_end(2) == 7
    assert lst.value_n_from_end(1) == 8


def test_value_n_from_end_errors():
    with pytest.raises(IndexError):
        LinkedList().value_n_from_end(1)
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.value_n_from_end(0)
    with pytest.raises(IndexError):
        lst.value_n_from_end(3)


def test_reverse():
    lst = LinkedList()
    lst.push_back(4)
    lst.reverse()
    assert lst.value_at(0) == 4
    lst.push_back(5)
    lst.reverse()
    assert lst.value_at(0) == 5
    assert lst.value_at(1) == 4
    lst.push_back(3)
    lst.reverse()
    assert lst.value_at(0) == 3
    assert lst.value_at(1) == 4
    assert lst.value_at(2) == 5


def test_reverse_empty_stays_empty():
    lst = LinkedList()
    lst.reverse()
    assert list(lst) == []


def test_remove_value():
    lst = LinkedList()
    lst.push_back(1)
    lst.remove_value(1)
    assert lst.is_empty()
    lst.remove_value(9)
    assert lst.is_empty()

    lst.push_back(1)
    lst.push_back(2)
    lst.remove_value(1)
    assert len(lst) == 1
    assert lst.value_at(0) == 2

    lst.push_back(3)
    lst.push_back(4)
    lst.remove_value(4)
    assert len(lst) == 2
    assert lst.value_at(1) == 3


def test_remove_value_only_first():
    lst = LinkedList([2, 5, 2])
    lst.remove_value(2)
    assert list(lst) == [5, 2]


def test_describe():
    assert LinkedList([1, 2]).describe() == "1 -> 2 -> \n"
    assert LinkedList().describe() == "\n"