# algokit

A collection of classic algorithms and data structures written as plain
Python with no third-party dependencies.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.backtracking` | `hamiltonian_cycles` (generator of cycles), `n_queens`, `maze_paths` (generator of path grids) |
| `algokit.integers` | bit helpers (`get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bit_range`), `count_set_bits`, `count_set_bits_fast`, `gcd` |
| `algokit.dynamic` | `knapsack_01`, `travelling_salesman` |
| `algokit.greedy` | `Item`, `Job`, `max_activities`, `fractional_knapsack`, `job_sequencing` |
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `quick_sort_lomuto`, `dutch_flag_sort`, `inversion_count` |
| `algokit.heaps` | `heapify`, `build_max_heap`, `heap_sort`, `MaxHeap`, `MinHeap` |
| `algokit.searching` | `linear_search`, `binary_search`, `lower_bound`, `upper_bound`, `count_occurrences` |
| `algokit.hanoi` | `tower_of_hanoi` (generator of moves) |
| `algokit.textops` | `reverse_string`, `sort_strings`, `tokenize` |
| `algokit.dsu` | `UnionFind`, `process_commands` |
| `algokit.queues` | `CircularQueue`, `QueueFullError`, `QueueEmptyError`, `Person`, `oldest` |
| `algokit.stack` | `BoundedStack`, `StackOverflowError`, `StackUnderflowError` |
| `algokit.trees` | `Node`, `insert`, `inorder`, `preorder`, `postorder`, `level_order`, `height` |
| `algokit.graphs` | `Graph`, `bfs`, `dfs`, `articulation_points`, `greedy_coloring` (returns a `Coloring`) |
| `algokit.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `NegativeCycleError` |
| `algokit.mst` | `kruskal`, `kruskal_weight`, `prim`, `prim_weight` |
| `algokit.flow` | `ford_fulkerson`, `FlowResult` |

Sorting functions take any iterable and return a new sorted list. The
input is left unchanged.

## Examples

```python
from algokit.sorting import merge_sort, inversion_count
from algokit.searching import lower_bound, upper_bound
from algokit.dynamic import travelling_salesman
from algokit.integers import gcd
from algokit.hanoi import tower_of_hanoi

merge_sort([5, 4, 3, 6, 1, 2, 7])        # [1, 2, 3, 4, 5, 6, 7]
inversion_count([5, 4, 3, 6, 1, 2, 7])

values = [10, 20, 40, 40, 40, 70, 100, 130, 560]
lower_bound(values, 40), upper_bound(values, 40)   # (2, 5)

graph = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]
travelling_salesman(graph, 0)            # 80

gcd(48, 18)                              # 6

list(tower_of_hanoi(2))
# [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

Disjoint sets:

```python
from algokit.dsu import UnionFind

sets = UnionFind(5)
sets.union(0, 1)        # True
sets.same_set(0, 1)     # True
sets.set_count          # 4
```

Containers with a fixed capacity raise exceptions when they are full or
empty:

```python
from algokit.stack import BoundedStack, StackOverflowError

stack = BoundedStack()          # capacity 5 by default
for value in (10, 20, 30, 40, 50):
    stack.push(value)
try:
    stack.push(60)
except StackOverflowError:
    ...
```

`CircularQueue` does the same with `QueueFullError` and `QueueEmptyError`.
Shortest-path functions mark unreachable vertices with `math.inf`, and
`bellman_ford` raises `NegativeCycleError` when a negative cycle can be
reached from the source.

## What this package does not do

algokit is a library only. It has no command-line program and reads no
input from the terminal. Functions never print; they return their results,
so they can be combined freely in your own code.