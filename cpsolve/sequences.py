"""Subsequence, subset-sum and interval problems over integer sequences."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterable, Sequence
from typing import TypeVar

from cpsolve.counting import MOD
from cpsolve.segment_tree import SegmentTree

T = TypeVar("T")


def longest_common_subsequence(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Return one longest common subsequence of ``first`` and ``second``."""
    n, m = len(first), len(second)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if first[i] == second[j]:
                row[j] = 1 + below[j + 1]
            else:
                row[j] = max(below[j], row[j + 1])
    result: list[T] = []
    i = j = 0
    while i < n and j < m:
        if first[i] == second[j]:
            result.append(first[i])
            i += 1
            j += 1
        elif table[i + 1][j] > table[i][j + 1]:
            i += 1
        else:
            j += 1
    return result


def money_sums(coins: Iterable[int]) -> list[int]:
    """Return, ascending, every positive sum reachable by a subset of ``coins``."""
    sums = {0}
    for coin in coins:
        if coin < 0:
            raise ValueError(f"coin values must be non-negative, got {coin}")
        sums |= {s + coin for s in sums}
    sums.discard(0)
    return sorted(sums)


def mountain_range(heights: Sequence[int]) -> int:
    """Return the most mountains visited by one glide through ``heights``.

    A glide may only go from a mountain to a lower one with nothing at least
    as high as the lower one in between.
    """
    n = len(heights)
    indegree = [0] * n
    children: list[list[int]] = [[] for _ in range(n)]
    for order in (range(n), range(n - 1, -1, -1)):
        stack: list[int] = []
        for i in order:
            while stack and heights[stack[-1]] <= heights[i]:
                stack.pop()
            if stack:
                indegree[i] += 1
                children[stack[-1]].append(i)
            stack.append(i)

    queue = deque((i, 1) for i in range(n) if indegree[i] == 0)
    best = 0
    while queue:
        node, count = queue.popleft()
        best = max(best, count)
        for child in children[node]:
            indegree[child] -= 1
            if indegree[child] == 0:
                queue.append((child, count + 1))
    return best


def _ranks(values: Iterable[int]) -> dict[int, int]:
    """Map each distinct value to its 1-based rank in ascending order."""
    return {value: rank for rank, value in enumerate(sorted(set(values)), start=1)}


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    ranks = _ranks(values)
    tree: SegmentTree[int] = SegmentTree(len(ranks) + 1, max, 0)
    best = 0
    for value in values:
        rank = ranks[value]
        length = 1 + tree.query(0, rank - 1)
        best = max(best, length)
        tree.update(rank, length)
    return best


def count_increasing_subsequences(values: Sequence[int]) -> int:
    """Count non-empty strictly increasing subsequences, modulo 10**9 + 7."""
    ranks = _ranks(values)
    tree: SegmentTree[int] = SegmentTree(
        len(ranks) + 1, lambda a, b: (a + b) % MOD, 0
    )
    total = 0
    for value in values:
        rank = ranks[value]
        ending_here = (tree.query(0, rank - 1) + 1) % MOD
        tree.update(rank, ending_here)
        total = (total + ending_here) % MOD
    return total


def max_project_reward(projects: Iterable[tuple[int, int, int]]) -> int:
    """Return the largest total reward of pairwise non-overlapping projects.

    Each project is ``(start, end, reward)`` occupying days ``start..end``.
    """
    jobs = sorted(projects, key=lambda job: job[0])
    for start, end, _ in jobs:
        if end < start:
            raise ValueError(f"project ends ({end}) before it starts ({start})")
    days = sorted({day for start, end, _ in jobs for day in (start - 1, end)})
    index = {day: position for position, day in enumerate(days)}
    tree: SegmentTree[int] = SegmentTree(len(days), max, 0)
    best = 0
    for start, end, reward in jobs:
        earned = tree.query(0, index[start - 1]) + reward
        best = max(best, earned)
        tree.update(index[end], earned)
    return best