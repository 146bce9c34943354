"""Minimisation and maximisation problems solved by dynamic programming."""

from __future__ import annotations

from collections.abc import Hashable, Sequence


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def minimizing_coins(coins: Sequence[int], target: int) -> int:
    """Return the fewest coins summing to ``target``, or -1 if no sum exists."""
    for coin in coins:
        if coin <= 0:
            raise ValueError(f"coin values must be positive, got {coin}")
    _require_non_negative("target", target)
    unreachable = target + 1
    fewest = [0] + [unreachable] * target
    for total in range(1, target + 1):
        fewest[total] = min(
            (fewest[total - c] + 1 for c in coins if c <= total),
            default=unreachable,
        )
        fewest[total] = min(fewest[total], unreachable)
    return -1 if fewest[target] >= unreachable else fewest[target]


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach 0, each step subtracting one of the digits."""
    _require_non_negative("n", n)
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        digits = {int(ch) for ch in str(value)} - {0}
        steps[value] = 1 + min(steps[value - d] for d in digits)
    return steps[n]


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages buyable within ``budget``, each book at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    _require_non_negative("budget", budget)
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        if price < 0:
            raise ValueError(f"prices must be non-negative, got {price}")
        for money in range(budget, price - 1, -1):
            best[money] = max(best[money], best[money - price] + count)
    return best[budget]


def rectangle_cutting(width: int, height: int) -> int:
    """Return the fewest straight cuts splitting a ``width`` x ``height`` rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError(f"sides must be positive, got {width} x {height}")
    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for i in range(1, width + 1):
        row = cuts[i]
        for j in range(1, height + 1):
            if i == j:
                continue
            best = min(
                (1 + row[k] + row[j - k] for k in range(1, j)),
                default=None,
            )
            across = min(
                (1 + cuts[k][j] + cuts[i - k][j] for k in range(1, i)),
                default=None,
            )
            row[j] = min(v for v in (best, across) if v is not None)
    return cuts[width][height]


def edit_distance(source: Sequence[Hashable], target: Sequence[Hashable]) -> int:
    """Return the fewest insertions, deletions and replacements turning ``source`` into ``target``."""
    previous = list(range(len(target) + 1))
    for i, left in enumerate(source, start=1):
        current = [i]
        for j, right in enumerate(target, start=1):
            if left == right:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def removal_game(values: Sequence[int]) -> int:
    """Return the first player's score when both take from either end optimally."""
    n = len(values)
    if n == 0:
        return 0
    # lead[i] after processing length L: best score difference on values[i:i+L].
    lead = list(values)
    for length in range(2, n + 1):
        lead = [
            max(values[i] - lead[i + 1], values[i + length - 1] - lead[i])
            for i in range(n - length + 1)
        ]
    return (sum(values) + lead[0]) // 2


def elevator_rides(weights: Sequence[int], capacity: int) -> int:
    """Return the fewest elevator rides carrying everyone, at most ``capacity`` per ride."""
    for weight in weights:
        if weight < 0:
            raise ValueError(f"weights must be non-negative, got {weight}")
        if weight > capacity:
            raise ValueError(f"weight {weight} exceeds capacity {capacity}")
    n = len(weights)
    if n == 0:
        return 0
    # best[mask] = (finished rides, load of the ride in progress)
    best: list[tuple[int, int]] = [(0, 0)] * (1 << n)
    for mask in range(1, 1 << n):
        options = []
        for person, weight in enumerate(weights):
            bit = 1 << person
            if mask & bit:
                rides, load = best[mask ^ bit]
                if load + weight <= capacity:
                    options.append((rides, load + weight))
                else:
                    options.append((rides + 1, weight))
        best[mask] = min(options)
    return best[-1][0] + 1