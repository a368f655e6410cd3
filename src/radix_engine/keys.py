"""
Fixed-width key types.

Python integers never wrap, so the width of a key type is expressed as a
range check rather than as storage. Sorting does not need a key type; when
one is given every key is checked against it before sorting starts.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from .errors import KeyRangeError, KeyTypeError


@dataclass(frozen=True)
class KeyType:
    name: str
    bits: int
    signed: bool

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    @classmethod
    def by_name(cls, name: str) -> "KeyType":
        try:
            return KEY_TYPES[name.lower()]
        except KeyError:
            choices = ", ".join(sorted(KEY_TYPES))
            raise ValueError(f"Unknown key type {name!r}; choose one of: {choices}") from None


INT8 = KeyType("int8", 8, True)
UINT8 = KeyType("uint8", 8, False)
INT16 = KeyType("int16", 16, True)
UINT16 = KeyType("uint16", 16, False)
INT32 = KeyType("int32", 32, True)
UINT32 = KeyType("uint32", 32, False)
INT64 = KeyType("int64", 64, True)
UINT64 = KeyType("uint64", 64, False)
# single-byte character codes, as unsigned char
CHAR = KeyType("char", 8, False)

KEY_TYPES: Dict[str, KeyType] = {
    t.name: t for t in (INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64, CHAR)
}


def as_key(value: Any, index: int) -> int:
    """Convert one key to a plain ``int``; characters map to their code."""
    if isinstance(value, bool):
        raise KeyTypeError(value, index)
    if isinstance(value, (str, bytes)) and len(value) == 1:
        return ord(value)
    try:
        return operator.index(value)
    except TypeError:
        raise KeyTypeError(value, index) from None


def coerce_keys(values: Iterable[Any]) -> List[int]:
    """Return the keys of ``values`` as a list of ints (``bytes`` iterate as ints already)."""
    return [as_key(v, i) for i, v in enumerate(values)]


def check_range(keys: Iterable[int], key_type: KeyType) -> None:
    lo, hi = key_type.minimum, key_type.maximum
    for i, k in enumerate(keys):
        if k < lo or k > hi:
            raise KeyRangeError(k, i, key_type)
