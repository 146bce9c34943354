"""Path and region problems on rectangular character grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

from cpsolve.counting import MOD

Cell = tuple[int, int]

# Order matters: it decides which of several shortest paths is reported.
_MOVES = (("D", 1, 0), ("U", -1, 0), ("R", 0, 1), ("L", 0, -1))


def _shape(grid: Sequence[str]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    for row in grid:
        if len(row) != cols:
            raise ValueError("grid rows must all have the same length")
    return rows, cols


def _neighbours(cell: Cell, rows: int, cols: int) -> Iterator[tuple[str, Cell]]:
    r, c = cell
    for move, dr, dc in _MOVES:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield move, (nr, nc)


def _locate(grid: Sequence[str], mark: str) -> Cell:
    found = [
        (r, c)
        for r, row in enumerate(grid)
        for c, ch in enumerate(row)
        if ch == mark
    ]
    if not found:
        raise ValueError(f"grid has no cell marked {mark!r}")
    return found[-1]


def count_rooms(grid: Sequence[str]) -> int:
    """Count the connected regions of floor cells ``'.'``, joined edge to edge."""
    rows, cols = _shape(grid)
    seen: set[Cell] = set()
    rooms = 0
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                cell = queue.popleft()
                for _, (nr, nc) in _neighbours(cell, rows, cols):
                    if grid[nr][nc] == "." and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        queue.append((nr, nc))
    return rooms


def labyrinth(grid: Sequence[str]) -> str | None:
    """Return a shortest move string (``U``, ``D``, ``L``, ``R``) from ``A`` to ``B``.

    Walls are ``'#'``. Returns ``None`` when ``B`` cannot be reached.
    """
    rows, cols = _shape(grid)
    start = _locate(grid, "A")
    end = _locate(grid, "B")
    parent: dict[Cell, tuple[Cell, str] | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            break
        for move, nxt in _neighbours(cell, rows, cols):
            if grid[nxt[0]][nxt[1]] != "#" and nxt not in parent:
                parent[nxt] = (cell, move)
                queue.append(nxt)
    if end not in parent:
        return None
    moves: list[str] = []
    cell = end
    while (link := parent[cell]) is not None:
        cell, move = link
        moves.append(move)
    return "".join(reversed(moves))


def minimal_grid_string(grid: Sequence[str]) -> str:
    """Return the smallest string read along a right/down path from corner to corner."""
    rows, cols = _shape(grid)
    if rows == 0 or cols == 0:
        raise ValueError("grid must not be empty")
    chars = [grid[0][0]]
    frontier: set[Cell] = {(0, 0)}
    for _ in range(rows + cols - 2):
        steps = {
            (r + dr, c + dc)
            for r, c in frontier
            for dr, dc in ((1, 0), (0, 1))
            if r + dr < rows and c + dc < cols
        }
        best = min(grid[r][c] for r, c in steps)
        chars.append(best)
        frontier = {(r, c) for r, c in steps if grid[r][c] == best}
    return "".join(chars)


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths between opposite corners avoiding traps ``'*'``, modulo 10**9 + 7."""
    rows, cols = _shape(grid)
    if rows == 0 or cols == 0:
        raise ValueError("grid must not be empty")
    ways = [0] * cols
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch == "*":
                ways[c] = 0
            elif r == 0 and c == 0:
                ways[c] = 1
            elif c > 0:
                ways[c] = (ways[c] + ways[c - 1]) % MOD
    return ways[-1]