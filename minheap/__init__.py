"""Binary min-heap over unsigned 64-bit integers."""

from .datastructures import (
    EmptyHeap,
    MinHeap,
    U64List,
    U64_MAX,
    build_heap,
    heap_sort,
    heapify,
    is_heap,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyHeap",
    "MinHeap",
    "U64List",
    "U64_MAX",
    "build_heap",
    "heap_sort",
    "heapify",
    "is_heap",
]
