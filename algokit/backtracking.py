"""Backtracking searches: N queens and sudoku."""

from __future__ import annotations

from typing import Iterator, Sequence

SIZE = 9
BOX = 3
UNASSIGNED = 0

Grid = Sequence[Sequence[int]]


def n_queens(num: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``num`` non-attacking queens.

    Each solution gives the 1-based column of the queen in each row;
    solutions come in lexicographic order.
    """
    if num < 1:
        return
    columns: list[int] = []

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == num:
            yield tuple(columns)
            return
        for col in range(1, num + 1):
            if all(c != col and abs(c - col) != row - r for r, c in enumerate(columns)):
                columns.append(col)
                yield from place(row + 1)
                columns.pop()

    yield from place(0)


def format_board(solution: Sequence[int]) -> str:
    """Render a queens solution as a tab-separated board with Q and - cells."""
    n = len(solution)
    header = "".join(f"\t{i}" for i in range(1, n + 1))
    rows = [
        str(row) + "".join("\tQ" if col == j else "\t-" for j in range(1, n + 1))
        for row, col in enumerate(solution, 1)
    ]
    return "\n".join([header, *rows])


def is_safe(grid: Grid, row: int, col: int, num: int) -> bool:
    """Return whether ``num`` appears in neither the row, the column nor the box of the cell."""
    if num in grid[row]:
        return False
    if any(grid[r][col] == num for r in range(SIZE)):
        return False
    top, left = row - row % BOX, col - col % BOX
    return all(
        grid[r][c] != num for r in range(top, top + BOX) for c in range(left, left + BOX)
    )


def _first_unassigned(grid: Grid) -> tuple[int, int] | None:
    for r, line in enumerate(grid):
        for c, value in enumerate(line):
            if value == UNASSIGNED:
                return r, c
    return None


def _solve(grid: list[list[int]]) -> bool:
    cell = _first_unassigned(grid)
    if cell is None:
        return True
    row, col = cell
    for num in range(1, SIZE + 1):
        if is_safe(grid, row, col, num):
            grid[row][col] = num
            if _solve(grid):
                return True
            grid[row][col] = UNASSIGNED
    return False


def solve_sudoku(grid: Grid) -> list[list[int]]:
    """Return a solved copy of a 9x9 sudoku in which 0 marks an empty cell."""
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("grid must be 9x9")
    work = [list(row) for row in grid]
    if not _solve(work):
        raise ValueError("no solution")
    return work