# pardemos

A handful of small classroom demos, each usable as a library and as a
command:

- `pardemos.sorting`: bubble sort and merge sort, with timings.
- `pardemos.stats`: minimum, maximum, sum and average of a list of integers.
- `pardemos.graph`: an undirected `Graph` with breadth-first and depth-first
  traversal.
- `pardemos.linalg`: element-wise vector addition and matrix multiplication,
  with helpers to make and print random digit data.

No third-party libraries are needed.

## Installation

```
pip install .
```

## Commands

```
pardemos-sort     # reads a count and the elements, prints both sorts and timings
pardemos-stats    # reads a count and the elements, prints min, max, sum, average
pardemos-graph    # reads vertices and edges, prints BFS and DFS from node 0
pardemos-linalg   # adds two random vectors and multiplies two random matrices
```

`pardemos-sort`, `pardemos-stats` and `pardemos-graph` prompt for their input
and read whitespace-separated integers from standard input, so they can be fed
from a pipe:

```
echo "5 4 2 5 1 3" | pardemos-sort
echo "5 4 2 5 1 3" | pardemos-stats
echo "4 3 0 1 0 2 1 3" | pardemos-graph
```

`pardemos-graph` reads the number of vertices, the number of edges and then
each edge as two vertex numbers. On missing, non-integer or out-of-range input
(a negative count, a vertex outside the graph, no elements for
`pardemos-stats`) a command prints an error to standard error and exits with
status 1.

`pardemos-sort` reports the processor time each sort took, in seconds.

`pardemos-linalg` takes two options:

```
pardemos-linalg --size 3 --seed 42
```

- `--size`: vector length and matrix order (default 4).
- `--seed`: seed for the random digits 0 to 9; without it each run differs.

## Library use

```python
import random

from pardemos.sorting import bubble_sort, merge_sort
from pardemos.stats import minimum, maximum, total, average
from pardemos.graph import Graph
from pardemos.linalg import (
    add_vectors, multiply_matrices, random_vector, random_matrix,
    format_vector, format_matrix,
)

bubble_sort([3, 1, 2])           # [1, 2, 3]
merge_sort([3, 1, 2])            # [1, 2, 3], stable
minimum([4, 2, 5])               # 2
maximum([4, 2, 5])               # 5
total([])                        # 0
average([1, 2, 3, 4])            # 2.5

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(1, 3)
g.neighbours(0)                  # [1, 2]
g.bfs(0)                         # [0, 1, 2, 3]
g.dfs(0)                         # [0, 1, 3, 2]

add_vectors([1, 2], [3, 4])      # [4, 6]
multiply_matrices([[1, 2], [3, 4]], [[5, 6], [7, 8]])   # [[19, 22], [43, 50]]

rng = random.Random(0)
m = random_matrix(3, rng)        # 3 x 3 digits 0..9
print(format_vector(random_vector(3, rng)))
print(format_matrix(m), end="")
```

Both sorts take any iterable and return a new list. `minimum`, `maximum` and
`average` raise `ValueError` for an empty input; `total` returns 0.
`Graph` raises `ValueError` for a negative vertex count or a vertex out of
range. Neighbours are kept in the order edges were added, which fixes the
traversal orders. `add_vectors` and `multiply_matrices` raise `ValueError`
when the shapes do not fit.

## What it does not do

Everything runs in a single thread of plain Python: the sorts, the statistics,
the traversals and the matrix arithmetic are not spread over several cores or
onto a graphics card, and the timings reported by `pardemos-sort` are not meant
as benchmarks.

## Tests

```
pip install .[test]
pytest
```