from __future__ import annotations
from typing import Iterable, Iterator, MutableSequence

from .u64_list import U64List, check_u64


class EmptyHeap(IndexError):
    """Raised when the minimum of an empty heap is requested."""


# -----------------------------
# Index arithmetic
# -----------------------------
def left(i: int) -> int:
    return 2 * i + 1


def right(i: int) -> int:
    return 2 * i + 2


def parent(i: int) -> int:
    return (i - 1) // 2


# -----------------------------
# Sift-down primitive
# -----------------------------
def sift_step(array: MutableSequence[int], size: int, root: int) -> int:
    """Perform one sift-down step at `root` within ``array[:size]``.

    Swaps the root with its smallest in-bounds child when that child is
    strictly smaller. Returns the index the root value moved to, or `root`
    itself when no swap was needed. Ties favour the lower index.
    """
    smallest = root
    left_index = left(root)
    right_index = right(root)
    if left_index < size and array[left_index] < array[smallest]:
        smallest = left_index
    if right_index < size and array[right_index] < array[smallest]:
        smallest = right_index
    if smallest != root:
        array[root], array[smallest] = array[smallest], array[root]
    return smallest


def heapify(array: MutableSequence[int], size: int, root: int) -> None:
    """Sink ``array[root]`` until the subtree at `root` is heap-ordered.

    Only the first `size` elements are considered. Both child subtrees of
    `root` must already satisfy the heap property.
    """
    current = root
    while current < size:
        moved = sift_step(array, size, current)
        if moved == current:
            break
        current = moved


def build_heap(array: MutableSequence[int]) -> None:
    """Arrange `array` into heap order in-place in O(n) time."""
    size = len(array)
    for root in range(size // 2 - 1, -1, -1):
        heapify(array, size, root)


def heap_sort(array: MutableSequence[int]) -> None:
    """Sort `array` ascending in-place (O(n log n) time, O(1) extra space).

    The array is first built into a min-heap. Each extraction then swaps
    the root into the last unsorted slot, which leaves the values in
    descending order; a final in-place reversal makes them ascending.
    """
    size = len(array)
    build_heap(array)
    for end in range(size - 1, 0, -1):
        array[0], array[end] = array[end], array[0]
        heapify(array, end, 0)

    lo, hi = 0, size - 1
    while lo < hi:
        array[lo], array[hi] = array[hi], array[lo]
        lo += 1
        hi -= 1


def is_heap(array: MutableSequence[int]) -> bool:
    """Return True if every element is <= each of its children."""
    size = len(array)
    for i in range(size // 2):
        left_index = left(i)
        right_index = right(i)
        if array[i] > array[left_index]:
            return False
        if right_index < size and array[i] > array[right_index]:
            return False
    return True


class MinHeap:
    """A binary min-heap of unsigned 64-bit integers.

    Values live in a `U64List` laid out breadth-first: the children of
    index ``i`` sit at ``2i+1`` and ``2i+2``. Every mutation is repaired
    with the same sift-down primitive (`heapify`).
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = U64List()

    @classmethod
    def from_sequence(cls, it: Iterable[int]) -> "MinHeap":
        """Build a heap from any iterable of u64 values (bulk build in O(n))."""
        heap = cls()
        heap._data = U64List(it)
        build_heap(heap._data)
        return heap

    def into_sequence(self) -> U64List:
        """Hand over the backing array (heap order, not sorted order).

        The heap is left empty; the caller owns the returned list.
        """
        data = self._data
        self._data = U64List()
        return data

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: int) -> None:
        """Insert `value` at the root and restore heap order (O(n))."""
        data = self._data
        data.insert(0, value)
        # The shift re-parents every element below the root, so the
        # whole tree is rebuilt; the last sift runs at the root.
        build_heap(data)

    def pop(self) -> int:
        """Pop and return the smallest value (O(log n))."""
        data = self._data
        if not data:
            raise EmptyHeap("pop from empty heap")
        top = data.swap_remove(0)
        heapify(data, len(data), 0)
        return top

    def min(self) -> int:
        """Return the smallest value without removing it (O(1))."""
        if not self._data:
            raise EmptyHeap("min of empty heap")
        return self._data[0]

    def replace(self, value: int) -> int:
        """Pop and return the smallest value, then insert `value` (O(log n))."""
        data = self._data
        if not data:
            raise EmptyHeap("replace on empty heap")
        top = data[0]
        data[0] = value
        heapify(data, len(data), 0)
        return top

    def pushpop(self, value: int) -> int:
        """Insert `value` then pop the smallest in a single O(log n) step."""
        value = check_u64(value)
        data = self._data
        if data and data[0] < value:
            value, data[0] = data[0], value
            heapify(data, len(data), 0)
        return value

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def to_list(self) -> list[int]:
        return self._data.to_py()

    def __iter__(self) -> Iterator[int]:
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._data)

    def __repr__(self) -> str:
        return f"MinHeap({self._data.to_py()!r})"
