import os
import sys
import random

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from minheap.datastructures.heap import EmptyHeap, MinHeap, is_heap
from minheap.datastructures.u64_list import U64_MAX, U64List


def test_new_heap_is_empty():
    h = MinHeap()
    assert h.size() == 0
    assert h.is_empty()
    assert not h
    assert len(h) == 0


def test_min_and_pop_on_empty_heap_raise():
    h = MinHeap()
    with pytest.raises(EmptyHeap):
        h.min()
    with pytest.raises(EmptyHeap):
        h.pop()
    with pytest.raises(EmptyHeap):
        h.replace(1)


def test_empty_heap_error_is_an_index_error():
    with pytest.raises(IndexError, match="empty heap"):
        MinHeap().pop()


def test_from_sequence_insert_pop_scenario():
    h = MinHeap.from_sequence([5, 3, 8, 1])
    assert is_heap(h.to_list())
    assert h.min() == 1

    h.insert(0)
    assert h.min() == 0
    assert h.size() == 5

    assert h.pop() == 0
    assert h.size() == 4
    assert h.min() == 1
    assert is_heap(h.to_list())


def test_pop_drains_in_ascending_order_then_fails():
    h = MinHeap.from_sequence([9, 4, 7, 1, 3])
    assert [h.pop() for _ in range(5)] == [1, 3, 4, 7, 9]
    with pytest.raises(EmptyHeap):
        h.pop()


def test_from_empty_sequence():
    h = MinHeap.from_sequence([])
    assert h.is_empty()
    assert h.into_sequence() == []


def test_insert_at_root_keeps_whole_tree_ordered():
    # Shifting this heap right by one breaks the 5 -> 3 parent/child pair.
    h = MinHeap.from_sequence([1, 5, 2, 6, 7, 3, 4])
    assert h.to_list() == [1, 5, 2, 6, 7, 3, 4]
    h.insert(0)
    assert is_heap(h.to_list())
    assert sorted(h) == [0, 1, 2, 3, 4, 5, 6, 7]


def test_min_does_not_mutate():
    h = MinHeap.from_sequence([4, 2, 6])
    before = h.to_list()
    assert h.min() == 2
    assert h.to_list() == before


def test_size_tracking():
    h = MinHeap()
    for i, v in enumerate([10, 3, 3, 7, U64_MAX, 0], start=1):
        h.insert(v)
        assert h.size() == i
    for i in range(5, -1, -1):
        h.pop()
        assert h.size() == i


def test_duplicates_pop_one_occurrence_at_a_time():
    h = MinHeap.from_sequence([2, 2, 1, 1, 1])
    assert h.pop() == 1
    assert sorted(h) == [1, 1, 2, 2]


def test_random_operations_keep_invariant():
    rng = random.Random(1234)
    h = MinHeap()
    shadow = []
    for _ in range(400):
        if shadow and rng.random() < 0.4:
            expected = min(shadow)
            assert h.min() == expected
            assert h.pop() == expected
            shadow.remove(expected)
        else:
            v = rng.randint(0, U64_MAX)
            h.insert(v)
            shadow.append(v)
        assert is_heap(h.to_list())
        assert h.size() == len(shadow)
    assert sorted(h) == sorted(shadow)


def test_round_trip_preserves_multiset_and_invariant():
    rng = random.Random(99)
    for n in (0, 1, 2, 3, 10, 57):
        values = [rng.randint(0, 50) for _ in range(n)]
        out = MinHeap.from_sequence(values).into_sequence()
        assert isinstance(out, U64List)
        assert sorted(out) == sorted(values)
        assert is_heap(out)


def test_into_sequence_hands_over_storage():
    h = MinHeap.from_sequence([3, 1, 2])
    out = h.into_sequence()
    assert out == [1, 3, 2]
    assert h.is_empty()
    h.insert(7)
    assert out == [1, 3, 2]


def test_replace_and_pushpop():
    h = MinHeap.from_sequence([5, 2, 9])
    assert h.replace(7) == 2
    assert h.min() == 5
    assert h.pushpop(1) == 1
    assert h.size() == 3
    assert h.pushpop(8) == 5
    assert sorted(h) == [7, 8, 9]
    assert is_heap(h.to_list())


def test_pushpop_on_empty_heap_returns_value():
    h = MinHeap()
    assert h.pushpop(4) == 4
    assert h.is_empty()


def test_rejects_values_outside_u64():
    h = MinHeap()
    with pytest.raises(ValueError):
        h.insert(-1)
    with pytest.raises(ValueError):
        h.insert(U64_MAX + 1)
    with pytest.raises(TypeError):
        h.insert(1.5)
    with pytest.raises(TypeError):
        MinHeap.from_sequence([1, True])
    with pytest.raises(ValueError):
        h.pushpop(-3)
    assert h.is_empty()


def test_repr_and_iteration_follow_heap_order():
    h = MinHeap.from_sequence([3, 1, 2])
    assert list(h) == [1, 3, 2]
    assert repr(h) == "MinHeap([1, 3, 2])"
