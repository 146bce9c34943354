"""Cycle detection, ordering and path problems on directed graphs.

Nodes are numbered ``1..n``; every edge is a ``(source, target)`` pair.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from cpsolve.counting import MOD

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> tuple[list[list[int]], list[int]]:
    """Build successor lists and in-degrees, checking every endpoint."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has an endpoint outside 1..{n}")
        adj[u].append(v)
        indegree[v] += 1
    return adj, indegree


def _prune_unreachable(n: int, adj: list[list[int]], indegree: list[int]) -> None:
    """Strip, in place, the edges leaving nodes that node 1 cannot reach in a DAG."""
    queue = deque(i for i in range(2, n + 1) if indegree[i] == 0)
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0 and nxt != 1:
                queue.append(nxt)


def find_directed_cycle(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a directed cycle as ``[a, b, ..., a]`` following the edges, or ``None``."""
    adj, _ = _adjacency(n, edges)
    state = [0] * (n + 1)  # 0 unseen, 1 on the current path, 2 finished
    for root in range(1, n + 1):
        if state[root]:
            continue
        state[root] = 1
        path = [root]
        position = {root: 0}
        pending = [iter(adj[root])]
        while pending:
            for nxt in pending[-1]:
                if state[nxt] == 1:
                    return path[position[nxt]:] + [nxt]
                if state[nxt] == 0:
                    state[nxt] = 1
                    position[nxt] = len(path)
                    path.append(nxt)
                    pending.append(iter(adj[nxt]))
                    break
            else:
                done = path.pop()
                del position[done]
                state[done] = 2
                pending.pop()
    return None


def course_schedule(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return an order of ``1..n`` with every edge's source first, or ``None`` if none exists."""
    adj, indegree = _adjacency(n, edges)
    queue = deque(i for i in range(1, n + 1) if indegree[i] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order if len(order) == n else None


def longest_flight_route(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a route from 1 to n through the most cities in an acyclic graph, or ``None``."""
    adj, indegree = _adjacency(n, edges)
    _prune_unreachable(n, adj, indegree)
    cities = [0] * (n + 1)
    previous = [0] * (n + 1)
    cities[1] = 1
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if cities[node] + 1 > cities[nxt]:
                cities[nxt] = cities[node] + 1
                previous[nxt] = node
            if indegree[nxt] == 0:
                queue.append(nxt)
    if cities[n] == 0:
        return None
    route = [n]
    while route[-1] != 1:
        route.append(previous[route[-1]])
    route.reverse()
    return route


def game_routes(n: int, edges: Iterable[Edge]) -> int:
    """Count routes from 1 to n in an acyclic graph, modulo 10**9 + 7."""
    adj, indegree = _adjacency(n, edges)
    _prune_unreachable(n, adj, indegree)
    ways = [0] * (n + 1)
    ways[1] = 1
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            indegree[nxt] -= 1
            ways[nxt] = (ways[nxt] + ways[node]) % MOD
            if indegree[nxt] == 0:
                queue.append(nxt)
    return ways[n]