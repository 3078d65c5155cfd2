"""Matrix helpers: sparsity check, multiplication and hourglass sums."""

from __future__ import annotations

from typing import Sequence

Matrix = Sequence[Sequence[int]]


def is_sparse(matrix: Matrix) -> bool:
    """Return whether the matrix holds more zeros than non-zero entries."""
    zeros = sum(value == 0 for row in matrix for value in row)
    total = sum(len(row) for row in matrix)
    return zeros > total - zeros


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the matrix product ``a @ b``."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of a must match rows of b")
    cols = len(b[0]) if b else 0
    if any(len(row) != cols for row in b):
        raise ValueError("b must be rectangular")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def hourglass_sum(grid: Matrix) -> int:
    """Return the largest sum of any 3x3 hourglass in the grid."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid must be rectangular")
    if rows < 3 or cols < 3:
        raise ValueError("grid must be at least 3x3")
    return max(
        sum(grid[r][c : c + 3]) + grid[r + 1][c + 1] + sum(grid[r + 2][c : c + 3])
        for r in range(rows - 2)
        for c in range(cols - 2)
    )