"""Shortest, longest and k-shortest route problems on weighted directed graphs.

Cities are numbered ``1..n``; every edge is a ``(source, target, weight)`` triple.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from cpsolve.counting import MOD

Edge = tuple[int, int, int]


@dataclass(frozen=True)
class RouteSummary:
    """Facts about the cheapest routes from city 1 to city n."""

    price: int
    routes: int
    min_flights: int
    max_flights: int


def _validate(n: int, edges: Iterable[Edge]) -> list[Edge]:
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    checked: list[Edge] = []
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has an endpoint outside 1..{n}")
        checked.append((u, v, w))
    return checked


def _adjacency(n: int, edges: list[Edge]) -> list[list[tuple[int, int]]]:
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        adj[u].append((v, w))
    return adj


def _require_non_negative_weights(edges: list[Edge]) -> None:
    for u, v, w in edges:
        if w < 0:
            raise ValueError(f"edge ({u}, {v}) has negative weight {w}")


def high_score(n: int, edges: Iterable[Edge]) -> int | None:
    """Return the largest total weight of a route from 1 to n.

    Returns ``None`` when the score is unbounded, that is when a positive
    cycle lies on some route from 1 to n. Raises ``ValueError`` when n cannot
    be reached at all.
    """
    edge_list = _validate(n, edges)
    best: list[int | None] = [None] * (n + 1)
    best[1] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in edge_list:
            score = best[u]
            if score is not None and (best[v] is None or score + w > best[v]):
                best[v] = score + w
                changed = True
        if not changed:
            break

    growing: set[int] = set()
    for u, v, w in edge_list:
        score = best[u]
        if score is not None and (best[v] is None or score + w > best[v]):
            best[v] = score + w
            growing.add(v)

    if growing:
        forward = [[v for v, _ in row] for row in _adjacency(n, edge_list)]
        seen = set(growing)
        queue = deque(growing)
        while queue:
            node = queue.popleft()
            if node == n:
                return None
            for nxt in forward[node]:
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)

    if best[n] is None:
        raise ValueError(f"city {n} cannot be reached from city 1")
    return best[n]


def flight_discount(n: int, edges: Iterable[Edge]) -> int:
    """Return the cheapest price from 1 to n when one flight may be halved (rounded down)."""
    edge_list = _validate(n, edges)
    _require_non_negative_weights(edge_list)
    adj = _adjacency(n, edge_list)
    # cost[node][used]: cheapest arrival, with or without the coupon spent.
    cost: list[list[int | None]] = [[None, None] for _ in range(n + 1)]
    cost[1] = [0, 0]
    heap: list[tuple[int, int, int]] = [(0, 1, 0)]
    while heap:
        d, node, used = heapq.heappop(heap)
        if d != cost[node][used]:
            continue
        for nxt, w in adj[node]:
            options = [(d + w, used)]
            if not used:
                options.append((d + w // 2, 1))
            for nd, state in options:
                current = cost[nxt][state]
                if current is None or nd < current:
                    cost[nxt][state] = nd
                    heapq.heappush(heap, (nd, nxt, state))
    result = cost[n][1]
    if result is None:
        raise ValueError(f"city {n} cannot be reached from city 1")
    return result


def find_negative_cycle(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a negative cycle as ``[a, b, ..., a]`` following the edges, or ``None``."""
    edge_list = _validate(n, edges)
    dist = [0] * (n + 1)
    pred = [0] * (n + 1)
    last: int | None = None
    for _ in range(n):
        last = None
        for u, v, w in edge_list:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                pred[v] = u
                last = v
    if last is None:
        return None
    node = last
    for _ in range(n):
        node = pred[node]
    cycle = [node]
    cur = pred[node]
    while cur != node:
        cycle.append(cur)
        cur = pred[cur]
    cycle.append(node)
    cycle.reverse()
    return cycle


def flight_routes(n: int, edges: Iterable[Edge], k: int) -> list[int]:
    """Return the ``k`` cheapest route prices from 1 to n, ascending.

    Routes may revisit cities; fewer than ``k`` prices are returned when
    fewer routes exist.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    edge_list = _validate(n, edges)
    _require_non_negative_weights(edge_list)
    adj = _adjacency(n, edge_list)
    visits = [0] * (n + 1)
    prices: list[int] = []
    heap: list[tuple[int, int]] = [(0, 1)]
    while heap and visits[n] < k:
        d, node = heapq.heappop(heap)
        if visits[node] >= k:
            continue
        visits[node] += 1
        if node == n:
            prices.append(d)
        for nxt, w in adj[node]:
            heapq.heappush(heap, (d + w, nxt))
    return prices


def investigation(n: int, edges: Iterable[Edge]) -> RouteSummary:
    """Summarise the cheapest routes from 1 to n.

    The route count is taken modulo 10**9 + 7.
    """
    edge_list = _validate(n, edges)
    _require_non_negative_weights(edge_list)
    adj = _adjacency(n, edge_list)
    dist: list[int | None] = [None] * (n + 1)
    ways = [0] * (n + 1)
    fewest = [0] * (n + 1)
    most = [0] * (n + 1)
    dist[1] = 0
    ways[1] = 1
    heap: list[tuple[int, int]] = [(0, 1)]
    while heap:
        d, node = heapq.heappop(heap)
        if d != dist[node]:
            continue
        for nxt, w in adj[node]:
            nd = d + w
            current = dist[nxt]
            if current is None or nd < current:
                dist[nxt] = nd
                ways[nxt] = ways[node]
                fewest[nxt] = fewest[node] + 1
                most[nxt] = most[node] + 1
                heapq.heappush(heap, (nd, nxt))
            elif nd == current:
                ways[nxt] = (ways[nxt] + ways[node]) % MOD
                fewest[nxt] = min(fewest[nxt], fewest[node] + 1)
                most[nxt] = max(most[nxt], most[node] + 1)
    price = dist[n]
    if price is None:
        raise ValueError(f"city {n} cannot be reached from city 1")
    return RouteSummary(price, ways[n], fewest[n], most[n])