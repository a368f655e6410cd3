"""Exceptions raised by the radix engine."""

from __future__ import annotations

from typing import Any, Optional


class RadixSortError(Exception):
    """Base exception for all radix engine errors."""

    pass


class ConfigurationError(RadixSortError, ValueError):
    """Raised when a sort is requested with an invalid configuration."""

    pass


class InvalidBaseError(ConfigurationError):
    """
    Raised when the radix is not an integer >= 2.

    A base of 1 would need infinitely many digits and a base of 0 would
    divide by zero, so both are rejected before any buffer is allocated.
    """

    def __init__(self, base: Any, message: Optional[str] = None):
        self.base = base

        if message is None:
            message = f"Base must be an integer >= 2, got {base!r}"

        super().__init__(message)


class NegativeKeyError(ConfigurationError):
    """Raised when a negative key is given while the signed extension is off."""

    def __init__(self, value: int, index: int, message: Optional[str] = None):
        self.value = value
        self.index = index

        if message is None:
            message = (
                f"Negative key {value} at index {index}; "
                f"pass handle_negative=True to sort signed keys"
            )

        super().__init__(message)


class KeyRangeError(ConfigurationError):
    """Raised when a key does not fit the declared fixed-width key type."""

    def __init__(self, value: int, index: int, key_type: Any, message: Optional[str] = None):
        self.value = value
        self.index = index
        self.key_type = key_type

        if message is None:
            message = (
                f"Key {value} at index {index} is outside the range of "
                f"{key_type.name} [{key_type.minimum}, {key_type.maximum}]"
            )

        super().__init__(message)


class KeyTypeError(RadixSortError, TypeError):
    """Raised when a key is not an integral value."""

    def __init__(self, value: Any, index: int, message: Optional[str] = None):
        self.value = value
        self.index = index

        if message is None:
            message = (
                f"Key {value!r} at index {index} is not integral "
                f"(type {type(value).__name__})"
            )

        super().__init__(message)
