"""
Demo and benchmark harness for the radix engine.

Run with something like:
    python -m radix_engine --n 100000 --base 16 --strategy lsd --verify
    python -m radix_engine --benchmark --sizes 10000 100000
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from .config import SortOptions, Strategy
from .errors import RadixSortError
from .keys import KEY_TYPES
from .sorter import sort_with
from .verify import first_inversion, is_stable_sort_of

logger = logging.getLogger(__name__)


def random_keys(n: int, max_value: int, negative: bool = False) -> List[int]:
    low = -max_value if negative else 0
    return [random.randint(low, max_value) for _ in range(n)]


def dump(values: Sequence[int], console: Console, title: str = "Sorted") -> None:
    """Print index, value and printable character of every key."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("value", justify="right")
    table.add_column("char", justify="center")
    for i, v in enumerate(values):
        ch = chr(v) if 0x20 <= v < 0x7F else "?"
        table.add_row(str(i), str(v), ch)
    console.print(table)


def benchmark(sizes: Sequence[int], options: SortOptions, max_value: int, console: Console) -> None:
    """Time both strategies for increasing input sizes."""
    console.print(f"\n=== Radix Sort Performance (base {options.base}) ===")
    for n in sizes:
        A = random_keys(n, max_value, options.handle_negative)
        for strategy in Strategy:
            run = SortOptions(
                base=options.base,
                strategy=strategy,
                handle_negative=options.handle_negative,
                key_type=options.key_type,
            )
            start = time.perf_counter()
            sort_with(A, run)
            end = time.perf_counter()
            console.print(f"{strategy.value}  n = {n:>10,}  →  time = {end - start:.3f} s")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="radix-engine", description="Radix sort demo")
    parser.add_argument("--n", type=int, default=20, help="Number of random integers to sort.")
    parser.add_argument("--max-value", type=int, default=10**9, help="Largest random magnitude.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--base", type=int, default=10, help="Radix used for digit extraction.")
    parser.add_argument("--strategy", choices=[s.value for s in Strategy], default=Strategy.MSD.value)
    parser.add_argument("--negative", action="store_true", help="Include negative keys and sort them.")
    parser.add_argument("--key-type", choices=sorted(KEY_TYPES), default=None, help="Fixed-width range to enforce.")
    parser.add_argument("--reverse", action="store_true", help="Reverse the input before sorting.")
    parser.add_argument("--verify", action="store_true", help="Check the result is a stable sort of the input.")
    parser.add_argument("--dump", action="store_true", help="Print the sorted keys as a table.")
    parser.add_argument("--benchmark", action="store_true", help="Time both strategies over --sizes.")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10_000, 100_000], help="Benchmark input sizes.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)
    if args.n < 0:
        parser.error(f"--n must be >= 0, got {args.n}")
    if args.max_value < 0:
        parser.error(f"--max-value must be >= 0, got {args.max_value}")
    return args


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    console = console or Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.seed is not None:
        random.seed(args.seed)

    try:
        options = SortOptions(
            base=args.base,
            strategy=args.strategy,
            handle_negative=args.negative,
            key_type=args.key_type,
        )
        if args.benchmark:
            benchmark(args.sizes, options, args.max_value, console)
            return 0

        data = random_keys(args.n, args.max_value, args.negative)
        if args.reverse:
            data.reverse()

        t0 = time.perf_counter()
        result = sort_with(data, options)
        t1 = time.perf_counter()
    except RadixSortError as e:
        logger.error("%s", e)
        return 2

    console.print(
        f"Sorted {len(result):,} integers with {options.strategy.value.upper()} "
        f"base {options.base} in {t1 - t0:.3f} s."
    )
    if args.dump:
        dump(result, console)
    if args.verify and not is_stable_sort_of(data, result):
        bad = first_inversion(result)
        console.print(f"[red]Result is not sorted correctly (first inversion at {bad})[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
