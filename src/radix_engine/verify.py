"""Stateless checks for sort results."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Sequence


def first_inversion(sequence: Sequence[Any], key: Optional[Callable[[Any], Any]] = None) -> Optional[int]:
    """Index of the first item whose key is smaller than its predecessor's, or None."""
    previous = None
    for i, v in enumerate(sequence):
        k = v if key is None else key(v)
        if i and k < previous:
            return i
        previous = k
    return None


def is_sorted(sequence: Sequence[Any], key: Optional[Callable[[Any], Any]] = None) -> bool:
    """True when ``sequence`` is non-decreasing by key."""
    return first_inversion(sequence, key) is None


def _groups(seq: Sequence[Any], key: Callable[[Any], Any]) -> Dict[Any, List[Any]]:
    out: Dict[Any, List[Any]] = defaultdict(list)
    for v in seq:
        out[key(v)].append(v)
    return out


def is_stable_sort_of(
    original: Sequence[Any],
    result: Sequence[Any],
    key: Optional[Callable[[Any], Any]] = None,
) -> bool:
    """
    True when ``result`` is a stable sort of ``original``.

    That is: ``result`` is sorted, holds the same items, and every group of
    equal keys appears in ``result`` in its ``original`` order. Without
    ``key`` equal keys are indistinguishable, so only the multisets are
    compared, through sorted copies.
    """
    if len(original) != len(result) or not is_sorted(result, key):
        return False
    if key is None:
        return sorted(original) == list(result)
    return _groups(original, key) == _groups(result, key)
