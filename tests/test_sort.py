"""End-to-end tests for sort() across bases and strategies."""

import random
from operator import itemgetter

import pytest

from radix_engine import (
    CHAR,
    INT64,
    UINT64,
    InvalidBaseError,
    KeyRangeError,
    KeyTypeError,
    NegativeKeyError,
    SortOptions,
    Strategy,
    is_sorted,
    is_stable_sort_of,
    sort,
    sort_with,
)

BASES = [2, 3, 4, 5, 10, 16, 20, 100, 256]
STRATEGIES = [Strategy.MSD, Strategy.LSD]

FIXED_CASES = [
    [2, 3, 1],
    [1, 2, 3],
    [1, 2, 3, 11, 22],
    [1, 2, 3, 22, 11],
    [1, 2, 3, 11, 22, 333, 444],
    [1, 2, 3, 11, 5555, 22, 333, 444],
    [22, 23, 21, 32, 33, 31, 12, 13, 11],
    [222, 323, 121, 232, 333, 131, 212, 313, 111],
    [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12],
    [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 11],
    [9, 8, 7, 1, 2, 3, 1000, 100, 1234, 5678, 1234, 5678],
    [9, 8, 7, 1, 2, 3, 100, 1000, 1234, 5678, 1234, 5678],
    [9, 8, 7, 1, 2, 2234, 3, 100, 1000, 1234, 5678, 1234, 5678],
]


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("reverse", [False, True])
@pytest.mark.parametrize("data", FIXED_CASES)
def test_fixed_cases(data, reverse: bool, strategy: Strategy) -> None:
    if reverse:
        data = list(reversed(data))
    assert sort(data, 10, strategy) == sorted(data)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_reverse_input_scenario(strategy: Strategy) -> None:
    data = [9, 8, 7, 1, 2, 3, 1000, 100, 1234, 5678, 1234, 5678]
    assert sort(data, 10, strategy) == [1, 2, 3, 7, 8, 9, 100, 1000, 1234, 1234, 5678, 5678]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_small_ascending_scenario(strategy: Strategy) -> None:
    assert sort([1, 2, 3, 11, 22], 10, strategy) == [1, 2, 3, 11, 22]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_negative_scenario(strategy: Strategy) -> None:
    data = [9, -8, 7, -1, 2, -3, 1000, -100, 1234, -5678]
    expected = [-5678, -100, -8, -3, -1, 2, 7, 9, 1000, 1234]
    assert sort(data, 10, strategy, handle_negative=True) == expected


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_negative_scenario_rejected_without_extension(strategy: Strategy) -> None:
    data = [9, -8, 7, -1, 2, -3, 1000, -100, 1234, -5678]
    with pytest.raises(NegativeKeyError) as exc_info:
        sort(data, 10, strategy)
    assert exc_info.value.value == -8
    assert exc_info.value.index == 1


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("base", [2, 3, 8, 9, 10])
def test_foobar_bytes(base: int, strategy: Strategy) -> None:
    result = sort(b"foobar", base, strategy, key_type=CHAR)
    assert len(result) == 6
    assert result == sorted(b"foobar")
    assert bytes(result) == b"abfoor"


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("base", [2, 3, 8, 9, 10])
def test_foobar_with_terminator(base: int, strategy: Strategy) -> None:
    result = sort(b"foobar\0", base, strategy)
    assert len(result) == 7
    assert result[0] == 0
    assert is_sorted(result)


def test_characters_sort_by_code_point() -> None:
    assert sort("foobar", base=3) == [ord(c) for c in "abfoor"]
    assert sort(list("foobar"), base=2, key=lambda c: c) == list("abfoor")


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("base", BASES)
def test_random_sorted_and_permutation(base: int, strategy: Strategy) -> None:
    rng = random.Random(base)
    for n in (0, 1, 2, 17, 300):
        data = [rng.randint(0, 0x7FFFFFFF) for _ in range(n)]
        result = sort(data, base, strategy)
        assert is_sorted(result)
        assert result == sorted(data)


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("base", BASES)
def test_random_signed(base: int, strategy: Strategy) -> None:
    rng = random.Random(1000 + base)
    data = [rng.randint(-(10**6), 10**6) for _ in range(300)]
    assert sort(data, base, strategy, handle_negative=True) == sorted(data)


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("base", [2, 10, 256])
def test_int64_extremes(base: int, strategy: Strategy) -> None:
    data = [0, INT64.maximum, -1, INT64.minimum, 1, INT64.minimum + 1, INT64.maximum - 1]
    result = sort(data, base, strategy, handle_negative=True, key_type=INT64)
    assert result == sorted(data)


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("base", [2, 10, 16])
@pytest.mark.parametrize("signed", [False, True])
def test_stability_with_records(base: int, strategy: Strategy, signed: bool) -> None:
    rng = random.Random(base)
    low = -50 if signed else 0
    records = [(rng.randint(low, 50), i) for i in range(400)]
    result = sort(records, base, strategy, handle_negative=signed, key=itemgetter(0))

    assert is_stable_sort_of(records, result, key=itemgetter(0))
    assert result == sorted(records, key=itemgetter(0))


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_idempotent(strategy: Strategy) -> None:
    rng = random.Random(7)
    data = [rng.randint(-999, 999) for _ in range(200)]
    once = sort(data, 10, strategy, handle_negative=True)
    assert sort(once, 10, strategy, handle_negative=True) == once


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_input_not_mutated(strategy: Strategy) -> None:
    data = [5, 3, 9, 1]
    result = sort(data, 10, strategy)
    assert data == [5, 3, 9, 1]
    assert result is not data


def test_strategies_agree_on_ranges_and_generators() -> None:
    data = range(500, 0, -3)
    msd = sort(data, 7, "msd")
    lsd = sort((v for v in data), 7, "lsd")
    assert msd == lsd == sorted(data)


def test_sort_with_options() -> None:
    options = SortOptions(base=16, strategy="lsd", handle_negative=True)
    assert sort_with([3, -2, 1], options) == [-2, 1, 3]


@pytest.mark.parametrize("base", [0, 1, -2, True])
def test_invalid_base(base) -> None:
    with pytest.raises(InvalidBaseError):
        sort([3, 1, 2], base)


def test_invalid_base_rejected_for_empty_input() -> None:
    with pytest.raises(InvalidBaseError):
        sort([], 1)


def test_key_range_enforced() -> None:
    with pytest.raises(KeyRangeError) as exc_info:
        sort([1, 300, 2], 10, key_type="char")
    assert exc_info.value.index == 1
    assert exc_info.value.key_type is CHAR


@pytest.mark.parametrize("bad", [1.5, True, None, "ab"])
def test_non_integral_keys_rejected(bad) -> None:
    with pytest.raises(KeyTypeError):
        sort([1, bad, 2])


def test_unknown_strategy() -> None:
    with pytest.raises(ValueError):
        sort([1, 2], 10, "quick")


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_keys_wider_than_64_bits_rejected(strategy: Strategy) -> None:
    with pytest.raises(KeyRangeError) as exc_info:
        sort([2**1500, 3, 2**1500], 2, strategy)
    assert exc_info.value.index == 0
    assert exc_info.value.key_type is UINT64


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_default_width_follows_sign_handling(strategy: Strategy) -> None:
    assert sort([UINT64.maximum, 0], 2, strategy) == [0, UINT64.maximum]
    with pytest.raises(KeyRangeError) as exc_info:
        sort([UINT64.maximum, 0], 2, strategy, handle_negative=True)
    assert exc_info.value.key_type is INT64
    with pytest.raises(KeyRangeError):
        sort([-(2**1500), 1], 10, strategy, handle_negative=True)
