# cpsolve

Solvers for classic dynamic-programming and graph problems: counting,
sequence and optimisation problems, grid searches, successor graphs,
shortest paths and directed graphs. Pure Python, no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `cpsolve.counting`

Counts are taken modulo 10^9 + 7 (the constant `MOD`).

- `dice_combinations(n)`: ordered sequences of die throws (1 to 6) summing to `n`.
- `coin_combinations_ordered(coins, target)`: ordered coin sequences summing to `target`.
- `coin_combinations_unordered(coins, target)`: multisets of coins summing to `target`.
- `counting_towers(n)`: ways to build a width-2, height-`n` tower of blocks.
- `count_tilings(height, width)`: domino tilings of a `height` x `width` grid.
- `two_sets_count(n)`: ways to split `1..n` into two sets of equal sum.
- `array_descriptions(values, upper)`: fillings of the zeros in `values`
  with `1..upper` so that neighbours differ by at most 1.
- `counting_numbers(low, high)`: integers in `[low, high]` with no two equal
  adjacent digits (exact, not reduced modulo).

Invalid arguments (negative sizes, non-positive coins, `low > high`, and so
on) raise `ValueError`.

### `cpsolve.segment_tree`

`SegmentTree(size, combine, identity)` is a fixed-size array where every
position starts as `identity`. `update(index, value)` merges `value` into a
position with `combine`; `query(low, high)` folds the inclusive range (an
empty range gives `identity`). `combine` must be associative. Out-of-range
indices raise `IndexError`.

### `cpsolve.sequences`

- `longest_common_subsequence(first, second)`: one longest common subsequence, as a list.
- `money_sums(coins)`: every positive subset sum, ascending.
- `mountain_range(heights)`: the most mountains visited by one glide.
- `longest_increasing_subsequence(values)`: length of the longest strictly increasing subsequence.
- `count_increasing_subsequences(values)`: number of non-empty strictly
  increasing subsequences, modulo 10^9 + 7.
- `max_project_reward(projects)`: the best total reward from non-overlapping
  `(start, end, reward)` projects.

### `cpsolve.optimize`

- `minimizing_coins(coins, target)`: fewest coins summing to `target`, or `-1`.
- `removing_digits(n)`: fewest steps to reach 0 by subtracting one of the digits.
- `book_shop(prices, pages, budget)`: most pages buyable within `budget`.
- `rectangle_cutting(width, height)`: fewest cuts splitting a rectangle into squares.
- `edit_distance(source, target)`: Levenshtein distance between two sequences.
- `removal_game(values)`: the first player's score when both play optimally.
- `elevator_rides(weights, capacity)`: fewest rides carrying everyone.

### `cpsolve.grids`

Grids are sequences of equal-length strings.

- `count_rooms(grid)`: connected regions of `'.'` cells.
- `labyrinth(grid)`: a shortest move string of `U`, `D`, `L`, `R` from `A` to
  `B` avoiding `'#'`, or `None` when `B` is unreachable.
- `minimal_grid_string(grid)`: the smallest string read along a right/down
  path from the top-left to the bottom-right corner.
- `grid_paths(grid)`: right/down paths between the corners avoiding `'*'`,
  modulo 10^9 + 7.

### `cpsolve.functional_graph`

`SuccessorGraph(successors)` models planets `1..n` where planet `i`
teleports to `successors[i - 1]`. `walk(start, steps)` returns the planet
reached after `steps` teleports; `distance(source, target)` returns the
fewest teleports from `source` to `target`, or `None`.
`planet_cycles(successors)` gives, for each planet, the number of teleports
made before some planet is reached a second time.

### `cpsolve.shortest_paths`

Cities are numbered `1..n`; edges are `(source, target, weight)` triples.

- `high_score(n, edges)`: the largest route weight from 1 to n, or `None`
  when it is unbounded; `ValueError` when n is unreachable.
- `flight_discount(n, edges)`: cheapest price from 1 to n with one flight halved (rounded down).
- `find_negative_cycle(n, edges)`: a negative cycle as `[a, b, ..., a]`, or `None`.
- `flight_routes(n, edges, k)`: the `k` cheapest route prices from 1 to n, ascending.
- `investigation(n, edges)`: a `RouteSummary` with `price`, `routes`
  (modulo 10^9 + 7), `min_flights` and `max_flights` of the cheapest routes.

### `cpsolve.dag`

Nodes are numbered `1..n`; edges are `(source, target)` pairs.

- `find_directed_cycle(n, edges)`: a cycle as `[a, b, ..., a]`, or `None`.
- `course_schedule(n, edges)`: a topological order, or `None` if there is a cycle.
- `longest_flight_route(n, edges)`: a route from 1 to n through the most
  cities in an acyclic graph, or `None`.
- `game_routes(n, edges)`: number of routes from 1 to n in an acyclic graph,
  modulo 10^9 + 7.

## Example

```python
from cpsolve.counting import dice_combinations
from cpsolve.optimize import edit_distance
from cpsolve.segment_tree import SegmentTree

dice_combinations(3)            # 4
edit_distance("LOVE", "MOVIE")  # 2

tree = SegmentTree(8, max, 0)
tree.update(3, 5)
tree.query(0, 7)                # 5
```

## What it does not do

The package is a library only. It has no command-line program and does not
read problem input from standard input or files: callers pass the data as
Python values and get the answers back as return values.