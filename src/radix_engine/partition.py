"""
Stable counting partition by one digit.

Two placement policies, each stable on its own:

* forward scan with start offsets (``partition_forward``, used by MSD)
* backward scan with end offsets (``partition_backward``, used by LSD)

The bucket table is allocated per call and dropped when the call returns.
"""

from __future__ import annotations

from typing import Any, List, MutableSequence, Sequence, Tuple

from .signed import BucketFn


def _check(positional_power: int, size: int, destination: Sequence[Any], end: int) -> None:
    if positional_power < 1:
        raise ValueError(f"Positional power must be >= 1, got {positional_power}")
    if len(destination) < end:
        raise ValueError(f"Destination holds {len(destination)} items, need {end} for {size} keys")


def partition_forward(
    source: Sequence[Any],
    lo: int,
    size: int,
    destination: MutableSequence[Any],
    positional_power: int,
    bucket: BucketFn,
    buckets: int,
) -> Tuple[List[int], List[int]]:
    """
    Partition ``source[lo:lo + size]`` into ``destination[lo:lo + size]``.

    Returns ``(starts, counts)``: per-bucket start offsets relative to ``lo``
    and per-bucket sizes, i.e. the sub-ranges of the next MSD level.
    """
    _check(positional_power, size, destination, lo + size)
    end = lo + size

    # 1) Count frequency of each digit
    counts = [0] * buckets
    for i in range(lo, end):
        counts[bucket(source[i], positional_power)] += 1

    # 2) Exclusive prefix sum -> start offsets
    starts = [0] * buckets
    position = 0
    for b in range(buckets):
        starts[b] = position
        position += counts[b]

    # 3) Scatter LEFT -> RIGHT, advancing each start offset
    cursor = list(starts)
    for i in range(lo, end):
        v = source[i]
        b = bucket(v, positional_power)
        destination[lo + cursor[b]] = v
        cursor[b] += 1

    return starts, counts


def partition_backward(
    source: Sequence[Any],
    destination: MutableSequence[Any],
    positional_power: int,
    bucket: BucketFn,
    buckets: int,
) -> None:
    """Partition all of ``source`` into ``destination[:len(source)]``."""
    n = len(source)
    _check(positional_power, n, destination, n)

    # 1) Count frequency of each digit
    counts = [0] * buckets
    for v in source:
        counts[bucket(v, positional_power)] += 1

    # 2) Inclusive prefix sum -> end offsets
    for b in range(1, buckets):
        counts[b] += counts[b - 1]

    # 3) Scatter RIGHT -> LEFT, retreating each end offset
    for v in reversed(source):
        b = bucket(v, positional_power)
        counts[b] -= 1
        destination[counts[b]] = v
