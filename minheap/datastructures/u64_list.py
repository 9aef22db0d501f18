from __future__ import annotations
import ctypes
import operator
from collections.abc import Sequence
from typing import Iterable, Iterator, Optional, TypeVar, overload

U = TypeVar("U")

# Largest value representable in an unsigned 64-bit slot.
U64_MAX = 2**64 - 1


def check_u64(value: object) -> int:
    """Return `value` as an int if it fits in an unsigned 64-bit slot.

    Raises:
        TypeError: if `value` is not an integer (``bool`` is rejected too).
        ValueError: if `value` is negative or larger than ``U64_MAX``.
    """
    if isinstance(value, bool):
        raise TypeError("expected an unsigned 64-bit integer, got bool")
    try:
        v = operator.index(value)  # accepts int subclasses and numpy ints
    except TypeError:
        raise TypeError(
            f"expected an unsigned 64-bit integer, got {type(value).__name__}"
        ) from None
    if v < 0 or v > U64_MAX:
        raise ValueError(f"{v} is outside the unsigned 64-bit range")
    return v


class U64List:
    """A growable array of unsigned 64-bit integers.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `c_uint64` (not Python's built-in list),
      so every slot holds a machine word rather than a boxed object.
    • Capacity grows geometrically (x2) when full and shrinks by half
      when the array drops to a quarter of its capacity.
    • Values are validated on the way in; ctypes would otherwise wrap
      out-of-range integers silently.
    • Negative indices are normalized (like built-in list semantics).
    • Slicing returns another U64List.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    # Initial allocated capacity for the dynamic array.
    _INITIAL_CAPACITY = 4

    def __init__(self, it: Optional[Iterable[int]] = None) -> None:
        self._capacity = self._INITIAL_CAPACITY
        self._buf = self._make_array(self._capacity)
        self._size = 0

        if it is not None:
            self.extend(it)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a zeroed ctypes array of `capacity` unsigned 64-bit slots."""
        if capacity <= 0:
            capacity = 1  # never allow a zero-length buffer
        return (capacity * ctypes.c_uint64)()

    def _resize(self, new_capacity: int) -> None:
        """Move the live items into a buffer of `new_capacity` slots."""
        if new_capacity < self._size:
            raise ValueError("new capacity must be >= size")

        new_buf = self._make_array(new_capacity)
        ctypes.memmove(new_buf, self._buf, self._size * ctypes.sizeof(ctypes.c_uint64))

        self._buf = new_buf
        self._capacity = max(new_capacity, 1)

    def _grow_if_full(self) -> None:
        """Double capacity when the buffer is full (amortized O(1) append)."""
        if self._size >= self._capacity:
            self._resize(self._capacity * 2)

    def _shrink_if_sparse(self) -> None:
        if self._capacity > self._INITIAL_CAPACITY and self._size <= self._capacity // 4:
            self._resize(max(self._INITIAL_CAPACITY, self._capacity // 2))

    @staticmethod
    def _normalize_index(idx: int, size: int) -> int:
        """Map negative indices and validate bounds.

        Returns the non-negative index in [0, size).
        Raises IndexError if out of range.
        """
        if idx < 0:
            idx += size
        if idx < 0 or idx >= size:
            raise IndexError("list index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return self._capacity

    @property
    def nbytes(self) -> int:
        """Size in bytes of the backing buffer."""
        return ctypes.sizeof(self._buf)

    def append(self, value: int) -> None:
        """Append `value` to the end. Amortized O(1)."""
        v = check_u64(value)
        self._grow_if_full()
        self._buf[self._size] = v
        self._size += 1

    def extend(self, it: Iterable[int]) -> None:
        """Append all elements from `it` in order."""
        for v in it:
            self.append(v)

    def insert(self, idx: int, value: int) -> None:
        """Insert `value` before position `idx`, shifting the tail right.

        Like ``list.insert``, an `idx` past either end is clamped.
        Complexity: O(n - idx).
        """
        v = check_u64(value)
        if idx < 0:
            idx = max(0, idx + self._size)
        idx = min(idx, self._size)

        self._grow_if_full()
        buf = self._buf
        for j in range(self._size, idx, -1):
            buf[j] = buf[j - 1]
        buf[idx] = v
        self._size += 1

    def pop(self, idx: int = -1) -> int:
        """Remove and return the item at `idx` (default: last).

        Complexity: O(n - idx) due to left-shift of trailing elements.

        Raises:
            IndexError: if the list is empty or idx is out of range.
        """
        if self._size == 0:
            raise IndexError("pop from empty list")

        i = self._normalize_index(idx, self._size)
        buf = self._buf
        val = buf[i]
        for j in range(i, self._size - 1):
            buf[j] = buf[j + 1]
        self._size -= 1
        self._shrink_if_sparse()
        return val

    def swap_remove(self, idx: int) -> int:
        """Remove and return the item at `idx`, moving the last item into its slot.

        Does not preserve order. O(1) amortized.

        Raises:
            IndexError: if the list is empty or idx is out of range.
        """
        if self._size == 0:
            raise IndexError("swap_remove from empty list")

        i = self._normalize_index(idx, self._size)
        buf = self._buf
        val = buf[i]
        buf[i] = buf[self._size - 1]
        self._size -= 1
        self._shrink_if_sparse()
        return val

    def swap(self, i: int, j: int) -> None:
        """Exchange the items at positions `i` and `j`."""
        a = self._normalize_index(i, self._size)
        b = self._normalize_index(j, self._size)
        buf = self._buf
        buf[a], buf[b] = buf[b], buf[a]

    def clear(self) -> None:
        """Remove all items. Keeps capacity to avoid churn on re-use."""
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield items from left to right."""
        for i in range(self._size):
            yield self._buf[i]

    @overload
    def __getitem__(self, idx: int) -> int: ...
    @overload
    def __getitem__(self, idx: slice) -> "U64List": ...

    def __getitem__(self, idx):
        """Get an item or a slice.

        • `lst[i]` returns the element at i (supports negative indices).
        • `lst[a:b:c]` returns a new U64List with the slice.
        """
        if isinstance(idx, slice):
            start, stop, step = idx.indices(self._size)
            return U64List(self._buf[i] for i in range(start, stop, step))

        i = self._normalize_index(idx, self._size)
        return self._buf[i]

    def __setitem__(self, idx: int, value: int) -> None:
        """Set the element at `idx` to `value` (supports negative indices)."""
        i = self._normalize_index(idx, self._size)
        self._buf[i] = check_u64(value)

    def __contains__(self, value: object) -> bool:
        for i in range(self._size):
            if self._buf[i] == value:
                return True
        return False

    def index(self, value: int) -> int:
        """Return first index of `value`. O(n).

        Raises:
            ValueError: if the value is not present.
        """
        for i in range(self._size):
            if self._buf[i] == value:
                return i
        raise ValueError(f"{value!r} is not in U64List")

    @overload
    def get(self, idx: int) -> Optional[int]: ...
    @overload
    def get(self, idx: int, default: U) -> int | U: ...

    def get(self, idx: int, default=None):
        """Safe accessor: return item at `idx` or `default` if out of range."""
        try:
            i = self._normalize_index(idx, self._size)
        except IndexError:
            return default
        return self._buf[i]

    def to_py(self) -> list[int]:
        """Convert to a plain Python `list`."""
        return self._buf[: self._size]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, U64List):
            return self.to_py() == other.to_py()
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self.to_py() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        return self._size != 0

    def __repr__(self) -> str:
        return f"U64List({self.to_py()!r})"
