"""
Biased digit mapping for signed keys.

With the extension on, every pass uses ``2 * base`` buckets. Negative keys
fill ``[0, base)`` and non-negative keys fill ``[base, 2 * base)``. A
negative key's magnitude digit ``d`` maps to ``base - 1 - d``, so larger
magnitudes (smaller values) land in lower buckets. Missing high digits
count as ``d = 0``, which keeps every key padded to the same width.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .digits import digit

BucketFn = Callable[[Any, int], int]


def bucket_count(base: int, handle_negative: bool) -> int:
    return 2 * base if handle_negative else base


def signed_digit(value: int, positional_power: int, base: int) -> int:
    """Bucket of ``value`` at ``positional_power`` in ``[0, 2 * base)``."""
    if value >= 0:
        return base + (value // positional_power) % base
    # value // -p is the magnitude digit's quotient, computed without negating value
    return base - 1 - (value // -positional_power) % base


def bucket_function(base: int, handle_negative: bool, key: Optional[Callable[[Any], int]] = None) -> BucketFn:
    """Return ``f(item, positional_power) -> bucket index`` for one sort."""
    if key is None:
        if handle_negative:
            return lambda v, p: signed_digit(v, p, base)
        return lambda v, p: digit(v, p, base)

    if handle_negative:
        return lambda v, p: signed_digit(key(v), p, base)
    return lambda v, p: digit(key(v), p, base)
