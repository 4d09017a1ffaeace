# drills

A collection of classic algorithm exercises as plain Python functions and
small data structures. Most problems come in more than one version, for
example a brute-force solution and an optimal one, so you can compare them
or check one against another. Every function returns its result; none of
them prints.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module                 | Contents |
|------------------------|----------|
| `drills.numbers`       | Armstrong numbers, palindromic numbers, primality, digit counts, GCD, divisors, frequency counts |
| `drills.patterns`      | Text patterns: triangles, diamonds, boxes and pyramids |
| `drills.recursion`     | Factorial, Fibonacci, ranges, array reversal, string palindromes, natural sums |
| `drills.sorting`       | Bubble, insertion, merge, quick and selection sort, with recursive variants |
| `drills.arrays_easy`   | Rotations, unions, missing and single numbers, longest subarray with a given sum, and more |
| `drills.arrays_medium` | Subarray counts, leaders, Kadane's algorithm, spiral order, matrix rotation, two-sum (`PairMatch`) |
| `drills.arrays_hard`   | Elements above N/k, Pascal's triangle, three-sum |
| `drills.graphs`        | `Graph` and `WeightedGraph` with BFS, DFS, adjacency matrices and text parsing |
| `drills.singly`        | Singly linked list `Node` with cycle detection, reversal, middle node and more |
| `drills.doubly`        | Doubly linked list `DNode` with insertion, deletion and reversal |

Sorting and array functions return new lists and leave their input alone.
The linked-list functions relink nodes in place and return the new head.
Invalid input (for instance `factorial(0)` in `drills.recursion`, or an
empty sequence where a value is needed) raises `ValueError`.

## Examples

```python
from drills.numbers import gcd_euclid, divisors, is_armstrong
from drills.sorting import merge_sort
from drills.arrays_medium import max_subarray, two_sum_hashing
from drills.arrays_hard import pascal_triangle, three_sum
from drills.graphs import Graph
from drills import singly

gcd_euclid(12, 18)                         # 6
divisors(12)                               # [1, 2, 3, 4, 6, 12]
is_armstrong(153)                          # True

merge_sort([9, 4, 7, 6, 3, 1, 5])          # [1, 3, 4, 5, 6, 7, 9]

max_subarray([-2, -3, 4, -1, -2, 1, 5, -3])  # (7, [4, -1, -2, 1, 5])
two_sum_hashing([2, 6, 5, 8, 11], 14)
# PairMatch(first=6, second=8, first_index=1, second_index=3)

pascal_triangle(4)                         # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
three_sum([-1, 0, 1, 2, -1, -4], 0)        # [(-1, -1, 2), (-1, 0, 1)]

graph = Graph(5)
for a, b in [(0, 1), (1, 2), (1, 3), (0, 4)]:
    graph.add_edge(a, b)
graph.bfs(0)                               # [0, 1, 4, 2, 3]

head = singly.from_values([1, 2, 3, 4, 5])
singly.to_list(singly.reverse(head))       # [5, 4, 3, 2, 1]
```

Patterns come back as a single string with one line per row, ready to print:

```python
from drills.patterns import box_pattern

print(box_pattern(3))
# 33333
# 32223
# 32123
# 32223
# 33333
```

## Graphs from text

`drills.graphs.parse_graph` reads whitespace-separated integers: the
highest vertex number and the edge count, then one pair of vertices per
edge. `drills.graphs.parse_weighted_graph` takes the same form with a
weight after each pair. Vertices are numbered from 0 up to and including
the first number. `describe()` lists each vertex's neighbours and
`adjacency_matrix()` gives the matrix view.

```python
from drills.graphs import parse_weighted_graph

graph = parse_weighted_graph("3 2\n1 2 5\n2 3 7")
print(graph.describe())
# Vertex 1: 2:5
# Vertex 2: 1:5 3:7
# Vertex 3: 2:7
```

## What it does not do

The package is a library only: it installs no command-line program and
reads nothing from standard input. To try an exercise, call its function
from Python.