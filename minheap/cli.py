"""
MinHeap Command-Line Interface (CLI)

Exposes the u64 min-heap to a shell user via subcommands:
- sort:    print values in ascending order (in-place heap sort)
- heapify: print the heap-ordered backing array
- drain:   build a heap and print each popped minimum
- bench:   time every heap operation and write a CSV report

Usage examples:
    python -m minheap.cli sort 5 3 8 1
    python -m minheap.cli heapify --path numbers.txt
    echo "9 4 7 1 3" | python -m minheap.cli drain --path -
    python -m minheap.cli bench --path report.csv --base-input 50 --doublings 4
"""

import argparse
import logging
import sys

from .datastructures import MinHeap, check_u64, heap_sort
from . import bench

LOGGER = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Input helpers
# -------------------------------------------------------------------
def parse_u64(token):
    """Convert a command-line token to an unsigned 64-bit integer."""
    try:
        return check_u64(int(token))
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid u64 value {token!r}: {e}") from None


def read_values(args):
    """Collect values from positional arguments or from --path (``-`` = stdin)."""
    tokens = list(args.values)
    if args.path:
        if args.path == "-":
            tokens.extend(sys.stdin.read().split())
        else:
            with open(args.path, "r", encoding="utf-8") as f:
                tokens.extend(f.read().split())
    LOGGER.debug(f"Read {len(tokens)} value(s)")
    return [parse_u64(t) for t in tokens]


def print_values(values):
    print(" ".join(str(v) for v in values))


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_sort(args):
    """Sort the input ascending with heap sort."""
    values = read_values(args)
    heap_sort(values)
    print_values(values)


def cmd_heapify(args):
    """Print the backing array of a heap built from the input."""
    values = read_values(args)
    heap = MinHeap.from_sequence(values)
    print_values(heap.into_sequence())


def cmd_drain(args):
    """Pop every value from a heap built from the input, one per line."""
    heap = MinHeap.from_sequence(read_values(args))
    while not heap.is_empty():
        print(heap.pop())


def cmd_bench(args):
    """Benchmark heap operations and write a CSV report."""
    rows = bench.run_benchmarks(
        args.path,
        base_input=args.base_input,
        doublings=args.doublings,
        iterations=args.iterations,
        seed=args.seed,
    )
    print(f"Wrote {len(rows)} benchmark rows to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def _add_input_arguments(s):
    s.add_argument("values", nargs="*", help="unsigned 64-bit integers")
    s.add_argument("--path", help="file of whitespace-separated values ('-' for stdin)")


def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m minheap.cli", description="u64 MinHeap CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sort", help="Print values in ascending order")
    _add_input_arguments(s)
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("heapify", help="Print the heap-ordered array")
    _add_input_arguments(s)
    s.set_defaults(func=cmd_heapify)

    s = sub.add_parser("drain", help="Pop every value in ascending order")
    _add_input_arguments(s)
    s.set_defaults(func=cmd_drain)

    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--path", default=bench.OUTPUT_CSV)
    s.add_argument("--base-input", type=int, default=bench.DEFAULT_BASE_INPUT)
    s.add_argument("--doublings", type=int, default=bench.DEFAULT_DOUBLINGS)
    s.add_argument("--iterations", type=int, default=bench.DEFAULT_ITERATIONS)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m minheap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        args.func(args)
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
