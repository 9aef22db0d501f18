from .u64_list import U64List, U64_MAX, check_u64
from .heap import (
    EmptyHeap,
    MinHeap,
    build_heap,
    heap_sort,
    heapify,
    is_heap,
    left,
    parent,
    right,
    sift_step,
)

__all__ = [
    "U64List",
    "U64_MAX",
    "check_u64",
    "EmptyHeap",
    "MinHeap",
    "build_heap",
    "heap_sort",
    "heapify",
    "is_heap",
    "left",
    "parent",
    "right",
    "sift_step",
]
