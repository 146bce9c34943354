from itertools import combinations

import pytest
from hypothesis import given, strategies as st

from cpsolve.counting import MOD
from cpsolve.sequences import (
    count_increasing_subsequences,
    longest_common_subsequence,
    longest_increasing_subsequence,
    max_project_reward,
    money_sums,
    mountain_range,
)

small_lists = st.lists(st.integers(min_value=0, max_value=5), max_size=7)


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(x in it for x in sub)


def _increasing_index_subsets(values):
    for size in range(1, len(values) + 1):
        for combo in combinations(values, size):
            if all(a < b for a, b in zip(combo, combo[1:])):
                yield combo


@given(small_lists, small_lists)
def test_lcs_is_common_and_maximal(first, second):
    result = longest_common_subsequence(first, second)
    assert _is_subsequence(result, first)
    assert _is_subsequence(result, second)
    longest = max(
        (size for size in range(len(first) + 1)
         for combo in combinations(first, size)
         if _is_subsequence(combo, second)),
        default=0,
    )
    assert len(result) == longest


def test_lcs_of_identical_sequences_is_whole():
    data = [3, 1, 4, 1, 5]
    assert longest_common_subsequence(data, data) == data


def test_lcs_with_empty_is_empty():
    assert longest_common_subsequence([], [1, 2]) == []


def test_money_sums_worked_example():
    assert money_sums([4, 2, 5, 2]) == [2, 4, 5, 6, 7, 8, 9, 11, 13]


@given(st.lists(st.integers(min_value=1, max_value=20), max_size=6))
def test_money_sums_matches_subsets(coins):
    expected = {
        sum(combo)
        for size in range(1, len(coins) + 1)
        for combo in combinations(coins, size)
    }
    assert money_sums(coins) == sorted(expected)


def test_money_sums_rejects_negative():
    with pytest.raises(ValueError):
        money_sums([3, -1])


def test_mountain_range_worked_example():
    assert mountain_range([20, 15, 17, 35, 25, 40, 12, 19, 13, 12]) == 5


def test_mountain_range_monotone_visits_all():
    assert mountain_range(list(range(1, 8))) == 7
    assert mountain_range(list(range(8, 0, -1))) == 8


def test_mountain_range_flat_and_empty():
    assert mountain_range([4, 4, 4]) == 1
    assert mountain_range([]) == 0


@given(st.lists(st.integers(min_value=1, max_value=9), min_size=1, max_size=10))
def test_mountain_range_bounds(heights):
    assert 1 <= mountain_range(heights) <= len(heights)


@given(small_lists)
def test_lis_matches_subsets(values):
    expected = max((len(c) for c in _increasing_index_subsets(values)), default=0)
    assert longest_increasing_subsequence(values) == expected


def test_lis_of_empty_is_zero():
    assert longest_increasing_subsequence([]) == 0


@given(small_lists)
def test_count_increasing_matches_subsets(values):
    expected = sum(1 for _ in _increasing_index_subsets(values))
    assert count_increasing_subsequences(values) == expected % MOD


def test_count_increasing_distinct_ascending_is_all_subsets():
    assert count_increasing_subsequences(list(range(10))) == 2**10 - 1


def test_project_reward_worked_example():
    projects = [(2, 4, 4), (3, 6, 6), (6, 8, 2), (5, 7, 3)]
    assert max_project_reward(projects) == 7


project_lists = st.lists(
    st.tuples(
        st.integers(min_value=1, max_value=12),
        st.integers(min_value=0, max_value=4),
        st.integers(min_value=1, max_value=30),
    ).map(lambda t: (t[0], t[0] + t[1], t[2])),
    max_size=6,
)


@given(project_lists)
def test_project_reward_matches_subsets(projects):
    best = 0
    for size in range(1, len(projects) + 1):
        for combo in combinations(sorted(projects), size):
            if all(a[1] < b[0] for a, b in zip(combo, combo[1:])):
                best = max(best, sum(job[2] for job in combo))
    assert max_project_reward(projects) == best


def test_project_reward_empty_and_invalid():
    assert max_project_reward([]) == 0
    with pytest.raises(ValueError):
        max_project_reward([(5, 3, 10)])