"""
Digit model shared by every strategy.

All functions are pure and take the base as an argument, so sorts with
different bases never share state.
"""

from __future__ import annotations

from typing import Iterable

from .errors import InvalidBaseError


def validate_base(base) -> int:
    """Return ``base`` if it is an integer >= 2, else raise ``InvalidBaseError``."""
    if isinstance(base, bool) or not isinstance(base, int) or base < 2:
        raise InvalidBaseError(base)
    return base


def digit_count(value: int, base: int) -> int:
    """
    Number of base-``base`` digits needed for ``|value|``.

    Zero has one digit, as does any value whose magnitude is below ``base``.
    Negative values are divided by ``-base`` first so the magnitude is taken
    of a quotient, never of the value itself.
    """
    digits = 1
    if value < 0:
        if value > -base:
            return 1
        value = value // -base
        digits += 1
    while value >= base:
        value //= base
        digits += 1
    return digits


def power(base: int, n: int) -> int:
    """``base ** n`` by repeated multiplication."""
    value = 1
    while n > 0:
        n -= 1
        value *= base
    return value


def digit(value: int, positional_power: int, base: int) -> int:
    """Digit of a non-negative ``value`` at ``positional_power``, in ``[0, base)``."""
    return (value // positional_power) % base


def max_digit_count(values: Iterable[int], base: int, handle_negative: bool = False) -> int:
    """
    Digit count of the largest-magnitude key.

    One scan for the extremes, then one ``digit_count`` per extreme.
    """
    it = iter(values)
    try:
        first = next(it)
    except StopIteration:
        return 1

    maximum = minimum = first
    for v in it:
        if v > maximum:
            maximum = v
        elif v < minimum:
            minimum = v

    digits = digit_count(maximum, base)
    if handle_negative and minimum < 0:
        digits = max(digits, digit_count(minimum, base))
    return digits
