"""
Public sort entry point.

All contract checks (base, key types, signs, key ranges) run before any
working buffer is allocated; the strategies themselves assume valid input.
"""

from __future__ import annotations

import logging
from operator import itemgetter
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .config import SortOptions, Strategy
from .errors import NegativeKeyError
from .keys import INT64, UINT64, KeyType, check_range, coerce_keys
from .lsd import lsd_sort
from .msd import msd_sort

logger = logging.getLogger(__name__)

SortFn = Callable[..., List[Any]]

STRATEGIES: Dict[Strategy, SortFn] = {
    Strategy.MSD: msd_sort,
    Strategy.LSD: lsd_sort,
}


def sort(
    sequence: Iterable[Any],
    base: int = 10,
    strategy: Union[Strategy, str] = Strategy.MSD,
    handle_negative: bool = False,
    key: Optional[Callable[[Any], Any]] = None,
    key_type: Optional[Union[KeyType, str]] = None,
) -> List[Any]:
    """
    Return a new list with the items of ``sequence`` in stable non-decreasing key order.

    ``key`` extracts an integral key from each item; by default the items are
    the keys. Single characters are sorted by their code point and ``bytes``
    input sorts its byte values. The input is never modified.

    Without ``key_type`` keys must fit 64 bits: ``UINT64``, or ``INT64`` when
    ``handle_negative`` is set.
    """
    options = SortOptions(
        base=base, strategy=strategy, handle_negative=handle_negative, key_type=key_type
    )
    return sort_with(sequence, options, key=key)


def sort_with(
    sequence: Iterable[Any],
    options: SortOptions,
    key: Optional[Callable[[Any], Any]] = None,
) -> List[Any]:
    items = list(sequence)
    keys = coerce_keys(items if key is None else (key(v) for v in items))
    _check_keys(keys, options)

    impl = STRATEGIES[options.strategy]
    logger.debug(
        "sorting %d keys: strategy=%s base=%d signed=%s",
        len(keys), options.strategy.value, options.base, options.handle_negative,
    )

    if key is None:
        return impl(keys, options.base, options.handle_negative)

    # decorate with the coerced key, sort, undecorate
    decorated = impl(zip(keys, items), options.base, options.handle_negative, key=itemgetter(0))
    return [item for _, item in decorated]


def _check_keys(keys: List[int], options: SortOptions) -> None:
    if not options.handle_negative:
        for i, k in enumerate(keys):
            if k < 0:
                raise NegativeKeyError(k, i)
    # without a declared width, keys must still fit a 64-bit word
    key_type = options.key_type
    if key_type is None:
        key_type = INT64 if options.handle_negative else UINT64
    check_range(keys, key_type)
