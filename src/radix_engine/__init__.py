"""Base-parameterized radix sorting engine for fixed-width integral keys."""

from .config import SortOptions, Strategy
from .digits import digit, digit_count, max_digit_count, power
from .errors import (
    ConfigurationError,
    InvalidBaseError,
    KeyRangeError,
    KeyTypeError,
    NegativeKeyError,
    RadixSortError,
)
from .keys import CHAR, INT8, INT16, INT32, INT64, KEY_TYPES, UINT8, UINT16, UINT32, UINT64, KeyType
from .lsd import lsd_sort
from .msd import msd_sort
from .signed import signed_digit
from .sorter import sort, sort_with
from .verify import first_inversion, is_sorted, is_stable_sort_of

__version__ = "0.1.0"

__all__ = [
    "sort",
    "sort_with",
    "msd_sort",
    "lsd_sort",
    "is_sorted",
    "is_stable_sort_of",
    "first_inversion",
    "SortOptions",
    "Strategy",
    "KeyType",
    "KEY_TYPES",
    "INT8",
    "UINT8",
    "INT16",
    "UINT16",
    "INT32",
    "UINT32",
    "INT64",
    "UINT64",
    "CHAR",
    "digit",
    "digit_count",
    "power",
    "max_digit_count",
    "signed_digit",
    "RadixSortError",
    "ConfigurationError",
    "InvalidBaseError",
    "NegativeKeyError",
    "KeyRangeError",
    "KeyTypeError",
]
