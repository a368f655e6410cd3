"""Least-significant-digit-first radix sort."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional

from .digits import validate_base
from .partition import partition_backward
from .signed import bucket_count, bucket_function

logger = logging.getLogger(__name__)


def lsd_sort(
    values: Iterable[Any],
    base: int,
    handle_negative: bool = False,
    key: Optional[Callable[[Any], int]] = None,
) -> List[Any]:
    """
    Return a new stably sorted list of ``values``.

    Every pass re-partitions the whole sequence by one digit, least
    significant first, and stops once no key has a digit left at the
    current positional power.
    """
    base = validate_base(base)
    A = list(values)
    n = len(A)
    if n < 2:
        return A

    keys = A if key is None else [key(v) for v in A]
    max_value = max(keys)
    min_value = min(keys) if handle_negative else 0

    bucket = bucket_function(base, handle_negative, key)
    buckets = bucket_count(base, handle_negative)
    output = [None] * n

    passes = 0
    exp = 1
    # min_value // -exp > 0 exactly when |min_value| >= exp, without negating min_value
    while max_value // exp > 0 or min_value // -exp > 0:
        partition_backward(A, output, exp, bucket, buckets)
        A[:] = output
        exp *= base
        passes += 1

    logger.debug("lsd: n=%d base=%d passes=%d signed=%s", n, base, passes, handle_negative)
    return A
