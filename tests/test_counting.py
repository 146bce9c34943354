from itertools import combinations, product

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpsolve.counting import (
    MOD,
    array_descriptions,
    coin_combinations_ordered,
    coin_combinations_unordered,
    count_tilings,
    counting_numbers,
    counting_towers,
    dice_combinations,
    two_sets_count,
)


def _brute_ordered(parts, target):
    if target == 0:
        return 1
    return sum(_brute_ordered(parts, target - p) for p in parts if p <= target)


def _brute_unordered(coins, target):
    distinct = sorted(set(coins))

    def go(index, remaining):
        if remaining == 0:
            return 1
        if index == len(distinct):
            return 0
        coin = distinct[index]
        return sum(go(index + 1, remaining - k * coin) for k in range(remaining // coin + 1))

    return go(0, target)


def _no_equal_neighbours(number):
    text = str(number)
    return all(a != b for a, b in zip(text, text[1:]))


@pytest.mark.parametrize("n", range(0, 12))
def test_dice_matches_enumeration(n):
    assert dice_combinations(n) == _brute_ordered(range(1, 7), n)


def test_dice_large_follows_recurrence():
    values = [dice_combinations(k) for k in range(1000, 1007)]
    assert values[6] == sum(values[:6]) % MOD
    assert all(0 <= v < MOD for v in values)


def test_dice_negative_rejected():
    with pytest.raises(ValueError):
        dice_combinations(-1)


@settings(max_examples=40)
@given(st.lists(st.integers(1, 6), min_size=1, max_size=3), st.integers(0, 12))
def test_ordered_coins_match_enumeration(coins, target):
    assert coin_combinations_ordered(coins, target) == _brute_ordered(coins, target)


@settings(max_examples=40)
@given(st.lists(st.integers(1, 6), min_size=1, max_size=3, unique=True), st.integers(0, 15))
def test_unordered_coins_match_enumeration(coins, target):
    assert coin_combinations_unordered(coins, target) == _brute_unordered(coins, target)


def test_ordered_dice_faces_equal_dice_combinations():
    assert coin_combinations_ordered([1, 2, 3, 4, 5, 6], 200) == dice_combinations(200)


def test_coins_must_be_positive():
    with pytest.raises(ValueError):
        coin_combinations_ordered([0, 2], 5)
    with pytest.raises(ValueError):
        coin_combinations_unordered([-1], 5)


def test_counting_towers_pinned():
    assert counting_towers(2) == 8
    assert counting_towers(6) == 2864


def test_counting_towers_rejects_zero():
    with pytest.raises(ValueError):
        counting_towers(0)


@pytest.mark.parametrize("width", range(2, 12))
def test_tilings_two_rows_follow_fibonacci(width):
    assert count_tilings(2, width) == count_tilings(2, width - 1) + count_tilings(2, width - 2)


@pytest.mark.parametrize("height,width", [(3, 4), (4, 5), (2, 6), (4, 4), (1, 6)])
def test_tilings_symmetric(height, width):
    assert count_tilings(height, width) == count_tilings(width, height)


@pytest.mark.parametrize("height,width", [(3, 3), (5, 7), (1, 1)])
def test_tilings_odd_area_is_zero(height, width):
    assert count_tilings(height, width) == 0


def test_tilings_single_row():
    assert count_tilings(1, 4) == 1
    assert count_tilings(3, 0) == 1


@pytest.mark.parametrize("n", range(0, 16))
def test_two_sets_matches_enumeration(n):
    numbers = range(1, n + 1)
    total = n * (n + 1) // 2
    if total % 2 or n == 0:
        if n:
            assert two_sets_count(n) == 0
        return_value = two_sets_count(n)
        assert return_value * 2 % MOD == 1 if n == 0 else return_value == 0
    else:
        subsets = sum(
            1
            for size in range(n + 1)
            for combo in combinations(numbers, size)
            if sum(combo) == total // 2
        )
        assert two_sets_count(n) == subsets // 2


def _brute_descriptions(values, upper):
    options = [range(1, upper + 1) if v == 0 else [v] for v in values]
    return sum(
        1
        for arr in product(*options)
        if all(abs(a - b) <= 1 for a, b in zip(arr, arr[1:]))
    )


@settings(max_examples=60)
@given(st.integers(1, 4).flatmap(
    lambda upper: st.tuples(st.lists(st.integers(0, upper), min_size=1, max_size=5), st.just(upper))
))
def test_array_descriptions_match_enumeration(case):
    values, upper = case
    assert array_descriptions(values, upper) == _brute_descriptions(values, upper)


def test_array_descriptions_errors():
    with pytest.raises(ValueError):
        array_descriptions([], 3)
    with pytest.raises(ValueError):
        array_descriptions([4, 0], 3)


def test_counting_numbers_pinned():
    assert counting_numbers(123, 321) == 171


@settings(max_examples=60)
@given(st.integers(0, 2000), st.integers(0, 300))
def test_counting_numbers_match_enumeration(low, span):
    high = low + span
    expected = sum(1 for x in range(low, high + 1) if _no_equal_neighbours(x))
    assert counting_numbers(low, high) == expected


def test_counting_numbers_errors():
    with pytest.raises(ValueError):
        counting_numbers(10, 5)
    with pytest.raises(ValueError):
        counting_numbers(-1, 5)