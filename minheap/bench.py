"""
Performance benchmarks for the u64 MinHeap.

Each heap operation is timed over inputs that double in size, and the
averages are written to a CSV report:

    python -m minheap.cli bench --path min_heap_performance.csv
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Optional

from .datastructures import U64_MAX, MinHeap, heap_sort

LOGGER = logging.getLogger(__name__)

# Defaults, overridable from the command line.
DEFAULT_BASE_INPUT = 100
DEFAULT_DOUBLINGS = 5
DEFAULT_ITERATIONS = 5
OUTPUT_CSV = "min_heap_performance.csv"

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Std Dev Time (ms)",
    "Average Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_values(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Generate a list of random unsigned 64-bit integers of given size."""
    rng = rng or random
    return [rng.randint(0, U64_MAX) for _ in range(size)]


def measure_space(heap: MinHeap) -> int:
    """Bytes held by `heap`: the object itself plus its ctypes buffer."""
    return sys.getsizeof(heap) + sys.getsizeof(heap._data) + heap._data.nbytes


def measure_operation(
    operation: Callable[[List[int]], MinHeap],
    input_size: int,
    iterations: int = DEFAULT_ITERATIONS,
    rng: Optional[random.Random] = None,
) -> tuple[float, float, float]:
    """Run `operation` repeatedly; return (avg ms, stdev ms, avg bytes)."""
    times = []
    spaces = []
    for _ in range(iterations):
        data = generate_random_values(input_size, rng)
        start = time.perf_counter()
        heap = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # milliseconds
        spaces.append(measure_space(heap))

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    avg_space = statistics.mean(spaces)
    return avg_time, std_dev, avg_space


# ----------------------------
# Operations to Benchmark
# ----------------------------

def op_insert(data: List[int]) -> MinHeap:
    heap = MinHeap()
    for value in data:
        heap.insert(value)
    return heap


def op_pop(data: List[int]) -> MinHeap:
    heap = MinHeap.from_sequence(data)
    while not heap.is_empty():
        heap.pop()
    return heap


def op_min(data: List[int]) -> MinHeap:
    heap = MinHeap.from_sequence(data)
    for _ in range(min(3, len(data))):
        heap.min()
    return heap


def op_from_sequence(data: List[int]) -> MinHeap:
    return MinHeap.from_sequence(data)


def op_heap_sort(data: List[int]) -> MinHeap:
    heap = MinHeap.from_sequence(data)
    heap_sort(heap._data)
    return heap


OPERATIONS: Dict[str, Callable[[List[int]], MinHeap]] = {
    "insert": op_insert,
    "pop": op_pop,
    "min": op_min,
    "from_sequence": op_from_sequence,
    "heap_sort": op_heap_sort,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def input_sizes(base_input: int, doublings: int) -> List[int]:
    return [base_input * (2 ** i) for i in range(doublings)]


def run_benchmarks(
    output_file: str,
    base_input: int = DEFAULT_BASE_INPUT,
    doublings: int = DEFAULT_DOUBLINGS,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
) -> List[List[str]]:
    """Benchmark every operation and write the results to `output_file`.

    Returns the data rows written (without the header).
    """
    if base_input < 1 or doublings < 1 or iterations < 1:
        raise ValueError("base_input, doublings and iterations must be positive")

    rng = random.Random(seed)
    rows: List[List[str]] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes(base_input, doublings):
                avg_time, std_time, avg_space = measure_operation(op_func, size, iterations, rng)
                row = [str(size), op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                LOGGER.info(
                    f"{op_name:<14} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                    f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes"
                )

    LOGGER.info(f"Benchmark completed. Results saved to {output_file}")
    return rows
