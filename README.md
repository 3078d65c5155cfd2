# algokit

A collection of classic algorithms and data structures for Python, written as
small, plain functions and classes with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `merge_sort`, `shell_sort`, `shifting_sort` (and the `Shift` tuple it returns) |
| `algokit.numbers` | `find_min_x`, `extended_gcd`, `fibonacci`, `is_prime`, `is_leap_year`, `is_binary_palindrome`, `round_grades`, `count_fruits`, `kangaroo` |
| `algokit.matrix` | `is_sparse`, `multiply`, `hourglass_sum` |
| `algokit.strings` | `linear_search`, `rabin_karp_search`, `longest_common_subsequence` |
| `algokit.dp` | `count_coin_change`, `subset_sum`, `travelling_salesman`, `min_moves` |
| `algokit.graphs` | `dijkstra`, `shortest_route`, `floyd_warshall`, `prim_mst`, `INF` |
| `algokit.disjoint_set` | `DisjointSet` |
| `algokit.backtracking` | `n_queens`, `format_board`, `solve_sudoku`, `is_safe` |
| `algokit.circular_queue` | `CircularQueue` |
| `algokit.expressions` | `precedence`, `infix_to_postfix`, `evaluate_postfix` |
| `algokit.stack` | `BoundedStack`, `next_greater_to_right`, `next_greater_to_left` |
| `algokit.linked_list` | `LinkedList` |
| `algokit.segment_tree` | `SegmentTree` |
| `algokit.bst` | `TreeNode`, `BinarySearchTree`, `preorder`, `inorder`, `postorder`, `level_order`, `build_from_preorder`, `tree_height` |
| `algokit.expression_tree` | `is_operator`, `from_postfix`, `from_prefix` |
| `algokit.threaded_tree` | `ThreadedBinaryTree` |
| `algokit.calculator` | `Calculator` |

The sorting functions never change their argument; they return a new list.
Errors are raised as ordinary Python exceptions: for example `CircularQueue`
raises `OverflowError` when full and `IndexError` when empty, and
`BinarySearchTree.delete` raises `KeyError` for a missing value.

## Examples

Sorting and searching:

```python
from algokit.sorting import merge_sort
from algokit.strings import longest_common_subsequence, rabin_karp_search

merge_sort([12, 11, 13, 5, 6, 7])                # [5, 6, 7, 11, 12, 13]
longest_common_subsequence("AGGTAB", "GXTXAYB")  # "GTAB"
rabin_karp_search("THIS", "THIS THAT THIS")      # [0, 10]
```

Expressions and expression trees:

```python
from algokit.expressions import infix_to_postfix, evaluate_postfix
from algokit.expression_tree import from_postfix
from algokit.bst import inorder, level_order

infix_to_postfix("a+b*c")    # "abc*+"
evaluate_postfix("231*+9-")  # -4

tree = from_postfix("AB*CD*+")
level_order(tree)            # [["+"], ["*", "*"], ["A", "B", "C", "D"]]
inorder(tree)                # ["A", "*", "B", "+", "C", "*", "D"]
```

Binary search trees, plain and threaded:

```python
from algokit.bst import BinarySearchTree
from algokit.threaded_tree import ThreadedBinaryTree

tree = BinarySearchTree([8, 3, 10, 1, 6, 14, 4, 7, 13])
tree.inorder()    # [1, 3, 4, 6, 7, 8, 10, 13, 14]
tree.height()     # 3
7 in tree         # True
tree.leaves()     # [1, 4, 7, 13]

threaded = ThreadedBinaryTree([10, 6, 13, 15, 7, 20, 2, 3])
threaded.inorder()   # [2, 3, 6, 7, 10, 13, 15, 20]
threaded.preorder()  # [10, 6, 2, 3, 7, 13, 15, 20]
```

Graphs:

```python
from algokit.graphs import INF, dijkstra, floyd_warshall, prim_mst, shortest_route

edges = [
    ("a", "c", 1), ("a", "d", 2), ("b", "c", 2), ("c", "d", 1), ("b", "f", 3),
    ("c", "e", 3), ("e", "f", 2), ("d", "g", 1), ("g", "f", 1),
]
distances, previous = dijkstra(edges, "a")
distances["f"]                   # 4
shortest_route(previous, "f")    # ["f", "g", "d", "a"]

floyd_warshall([
    [0, 5, INF, 10],
    [INF, 0, 3, INF],
    [INF, INF, 0, 1],
    [INF, INF, INF, 0],
])
# [[0, 5, 8, 9], [INF, 0, 3, 4], [INF, INF, 0, 1], [INF, INF, INF, 0]]

prim_mst([
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
])
# [(0, 1, 2), (1, 2, 3), (0, 3, 6), (1, 4, 5)]
```

Dynamic programming and backtracking:

```python
from algokit.dp import count_coin_change, subset_sum, min_moves
from algokit.backtracking import n_queens

count_coin_change([1, 2, 3], 4)    # 4
subset_sum([3, 3, 3, 3], 6)        # True
min_moves([1, 2, 3, 4, 5], 3, 2)   # 2
list(n_queens(4))                  # [(2, 4, 1, 3), (3, 1, 4, 2)]
```

A desk calculator driven by key presses:

```python
from algokit.calculator import Calculator

calc = Calculator()
calc.enter_digit("7")
calc.press_operator("*")
calc.enter_digit("6")
calc.equals()
calc.display    # "42"
```

## What it does not do

algokit is a library only. It has no command-line program and no interactive
menus or prompts; every function and class is called from Python code.
`Calculator` models the keypad and display text of a calculator but draws no
window.