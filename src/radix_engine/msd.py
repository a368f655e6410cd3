"""
Most-significant-digit-first radix sort.

Two buffers of length ``n`` are allocated once per call and handed to every
recursive step. A step at depth ``d`` reads from ``buffers[d % 2]`` and
writes into the other one, so the roles of the buffers follow from the
recursion depth alone. Sibling steps work on disjoint index ranges.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, NamedTuple, Optional, Tuple

from .digits import max_digit_count, power, validate_base
from .partition import partition_forward
from .signed import BucketFn, bucket_count, bucket_function

logger = logging.getLogger(__name__)


class _Plan(NamedTuple):
    base: int
    digits: int
    bucket: BucketFn
    buckets: int


def msd_sort(
    values: Iterable[Any],
    base: int,
    handle_negative: bool = False,
    key: Optional[Callable[[Any], int]] = None,
) -> List[Any]:
    """Return a new stably sorted list of ``values``."""
    base = validate_base(base)
    result = list(values)
    n = len(result)
    if n < 2:
        return result

    keys = result if key is None else (key(v) for v in result)
    digits = max_digit_count(keys, base, handle_negative)
    plan = _Plan(
        base=base,
        digits=digits,
        bucket=bucket_function(base, handle_negative, key),
        buckets=bucket_count(base, handle_negative),
    )
    logger.debug("msd: n=%d base=%d digits=%d signed=%s", n, base, digits, handle_negative)

    buffers = (result, [None] * n)
    _sort_range(buffers, 0, n, digits, power(base, digits - 1), plan)
    return result


def _sort_range(
    buffers: Tuple[List[Any], List[Any]],
    lo: int,
    size: int,
    remaining: int,
    positional_power: int,
    plan: _Plan,
) -> None:
    parity = (plan.digits - remaining) % 2
    source = buffers[parity]
    destination = buffers[1 - parity]

    if size < 2 or positional_power < 1:
        # odd depth: this range lives in the scratch buffer
        if parity:
            buffers[0][lo:lo + size] = source[lo:lo + size]
        return

    starts, counts = partition_forward(
        source, lo, size, destination, positional_power, plan.bucket, plan.buckets
    )

    next_power = positional_power // plan.base
    for b in range(plan.buckets):
        if counts[b]:
            _sort_range(buffers, lo + starts[b], counts[b], remaining - 1, next_power, plan)
