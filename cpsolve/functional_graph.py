"""Queries on graphs where every planet has exactly one outgoing teleporter."""

from __future__ import annotations

from collections.abc import Sequence


class SuccessorGraph:
    """Planets ``1..n``; planet ``i`` teleports to ``successors[i - 1]``."""

    def __init__(self, successors: Sequence[int]) -> None:
        n = len(successors)
        nxt: list[int] = []
        for planet, target in enumerate(successors, start=1):
            if not 1 <= target <= n:
                raise ValueError(
                    f"planet {planet} points to {target}, outside 1..{n}"
                )
            nxt.append(target - 1)
        self._next = nxt
        self._jumps: list[list[int]] = [nxt]

        root = [-1] * n
        depth = [0] * n
        cycle_index = [-1] * n
        lengths: dict[int, int] = {}
        state = [0] * n  # 0 unseen, 1 on current path, 2 finished
        for i in range(n):
            if state[i]:
                continue
            path: list[int] = []
            position: dict[int, int] = {}
            cur = i
            while state[cur] == 0:
                state[cur] = 1
                position[cur] = len(path)
                path.append(cur)
                cur = nxt[cur]
            if state[cur] == 1:
                pos = position[cur]
                lengths[cur] = len(path) - pos
                for k, node in enumerate(path[pos:]):
                    root[node] = cur
                    cycle_index[node] = k
                for k, node in enumerate(path[:pos]):
                    root[node] = cur
                    depth[node] = pos - k
            else:
                for node in reversed(path):
                    after = nxt[node]
                    depth[node] = depth[after] + 1
                    root[node] = root[after]
            for node in path:
                state[node] = 2

        self._root = root
        self._depth = depth
        self._cycle_index = cycle_index
        self._cycle_length = [lengths[r] for r in root]

    def __len__(self) -> int:
        return len(self._next)

    def _index(self, planet: int) -> int:
        if not 1 <= planet <= len(self._next):
            raise ValueError(f"planet {planet} outside 1..{len(self._next)}")
        return planet - 1

    def _level(self, level: int) -> list[int]:
        while len(self._jumps) <= level:
            prev = self._jumps[-1]
            self._jumps.append([prev[p] for p in prev])
        return self._jumps[level]

    def _jump(self, node: int, steps: int) -> int:
        tail = self._depth[node]
        length = self._cycle_length[node]
        if steps > tail + length:
            steps = tail + (steps - tail) % length
        level = 0
        while steps:
            if steps & 1:
                node = self._level(level)[node]
            steps >>= 1
            level += 1
        return node

    def walk(self, start: int, steps: int) -> int:
        """Return the planet reached from ``start`` after ``steps`` teleports."""
        node = self._index(start)
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        return self._jump(node, steps) + 1

    def distance(self, source: int, target: int) -> int | None:
        """Return the fewest teleports from ``source`` to ``target``, or ``None``."""
        a = self._index(source)
        b = self._index(target)
        if self._root[a] != self._root[b]:
            return None
        if self._depth[b] > 0:
            k = self._depth[a] - self._depth[b]
            if k < 0 or self._jump(a, k) != b:
                return None
            return k
        to_cycle = self._depth[a]
        entry = self._jump(a, to_cycle)
        around = (self._cycle_index[b] - self._cycle_index[entry]) % self._cycle_length[a]
        return to_cycle + around


def planet_cycles(successors: Sequence[int]) -> list[int]:
    """For each planet, count teleports made before some planet is reached a second time."""
    graph = SuccessorGraph(successors)
    return [
        depth + length
        for depth, length in zip(graph._depth, graph._cycle_length)
    ]