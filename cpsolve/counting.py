"""Counting problems solved by dynamic programming, answers modulo 10**9 + 7."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache

MOD = 10**9 + 7
INV2 = (MOD + 1) // 2

_DIE_FACES = 6


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _require_positive_coins(coins: Sequence[int]) -> None:
    for coin in coins:
        if coin <= 0:
            raise ValueError(f"coin values must be positive, got {coin}")


def dice_combinations(n: int) -> int:
    """Count ordered sequences of die throws (1..6) summing to ``n``."""
    _require_non_negative("n", n)
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - _DIE_FACES):total]) % MOD)
    return ways[n]


def coin_combinations_ordered(coins: Sequence[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``."""
    _require_positive_coins(coins)
    _require_non_negative("target", target)
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - c] for c in coins if c <= total) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Sequence[int], target: int) -> int:
    """Count multisets of coins summing to ``target``."""
    _require_positive_coins(coins)
    _require_non_negative("target", target)
    ways = [1] + [0] * target
    for coin in coins:
        for total in range(coin, target + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target]


def counting_towers(n: int) -> int:
    """Count ways to build a tower of width 2 and height ``n`` from blocks."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    joined, split = 1, 1
    for _ in range(n - 1):
        joined, split = (4 * joined + split) % MOD, (joined + 2 * split) % MOD
    return (joined + split) % MOD


def _fill_column(height: int, occupied: int, row: int, spill: int) -> Iterator[int]:
    """Yield the masks a column leaves for the next one, given its occupied cells."""
    if row >= height:
        yield spill
        return
    bit = 1 << row
    if occupied & bit:
        yield from _fill_column(height, occupied, row + 1, spill)
        return
    yield from _fill_column(height, occupied | bit, row + 1, spill | bit)
    below = bit << 1
    if row + 1 < height and not occupied & below:
        yield from _fill_column(height, occupied | bit | below, row + 2, spill)


@lru_cache(maxsize=None)
def _transitions(height: int) -> tuple[tuple[int, ...], ...]:
    return tuple(
        tuple(_fill_column(height, mask, 0, 0)) for mask in range(1 << height)
    )


def count_tilings(height: int, width: int) -> int:
    """Count tilings of a ``height`` x ``width`` grid with 1x2 and 2x1 dominoes."""
    _require_non_negative("height", height)
    _require_non_negative("width", width)
    transitions = _transitions(height)
    counts = [0] * (1 << height)
    counts[0] = 1
    for _ in range(width):
        following = [0] * (1 << height)
        for mask, count in enumerate(counts):
            if count:
                for nxt in transitions[mask]:
                    following[nxt] = (following[nxt] + count) % MOD
        counts = following
    return counts[0]


def two_sets_count(n: int) -> int:
    """Count ways to split 1..n into two sets of equal sum."""
    _require_non_negative("n", n)
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    subsets = [1] + [0] * half
    for k in range(1, n + 1):
        for s in range(half, k - 1, -1):
            subsets[s] = (subsets[s] + subsets[s - k]) % MOD
    return subsets[half] * INV2 % MOD


def array_descriptions(values: Sequence[int], upper: int) -> int:
    """Count fillings of the zeros in ``values`` with 1..upper, neighbours differing by at most 1."""
    if not values:
        raise ValueError("values must not be empty")
    if upper < 1:
        raise ValueError(f"upper must be at least 1, got {upper}")
    for value in values:
        if value != 0 and not 1 <= value <= upper:
            raise ValueError(f"known values must lie in 1..{upper}, got {value}")

    def allowed(value: int) -> range:
        return range(1, upper + 1) if value == 0 else range(value, value + 1)

    # ways[v] for v in 0..upper+1; the two ends stay zero as padding.
    ways = [0] * (upper + 2)
    for v in allowed(values[0]):
        ways[v] = 1
    for value in values[1:]:
        following = [0] * (upper + 2)
        for v in allowed(value):
            following[v] = (ways[v - 1] + ways[v] + ways[v + 1]) % MOD
        ways = following
    return sum(ways) % MOD


def _count_up_to(limit: int) -> int:
    """Count integers in [0, limit] whose adjacent digits all differ."""
    if limit < 0:
        return 0
    digits = [int(ch) for ch in str(limit)]
    length = len(digits)
    total = 0
    if length > 1:
        total = 10 + sum(9**k for k in range(2, length))
    previous = None
    for position, digit in enumerate(digits):
        lowest = 1 if position == 0 and length > 1 else 0
        remaining = 9 ** (length - position - 1)
        total += sum(remaining for d in range(lowest, digit) if d != previous)
        if digit == previous:
            return total
        previous = digit
    return total + 1


def counting_numbers(low: int, high: int) -> int:
    """Count integers in [low, high] with no two equal adjacent digits."""
    _require_non_negative("low", low)
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    return _count_up_to(high) - _count_up_to(low - 1)