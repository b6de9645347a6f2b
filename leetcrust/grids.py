"""Problems on two-dimensional grids and matrices."""

from __future__ import annotations

import heapq
from typing import MutableSequence, Sequence

__all__ = [
    "game_of_life",
    "is_valid_sudoku",
    "trap_rain_water",
    "rotate",
    "find_diagonal_order",
    "sort_matrix",
    "first_complete_index",
]

_NEIGHBOUR_OFFSETS = [
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
]
_DIRECTIONS = [(-1, 0), (0, 1), (1, 0), (0, -1)]


def game_of_life(board: MutableSequence[MutableSequence[int]]) -> None:
    """Advance a Game of Life board by one generation, in place."""
    rows = len(board)
    cols = len(board[0]) if rows else 0

    def live_neighbours(i: int, j: int) -> int:
        return sum(
            board[i + di][j + dj] & 1
            for di, dj in _NEIGHBOUR_OFFSETS
            if 0 <= i + di < rows and 0 <= j + dj < cols
        )

    counts = [[live_neighbours(i, j) for j in range(cols)] for i in range(rows)]
    for row, row_counts in zip(board, counts):
        for j, neighbours in enumerate(row_counts):
            alive = row[j] & 1 == 1
            row[j] = int(neighbours == 3 or (alive and neighbours == 2))


def _has_duplicates(cells: Sequence[str]) -> bool:
    digits = [cell for cell in cells if cell != "."]
    for digit in digits:
        if len(digit) != 1 or digit not in "123456789":
            raise ValueError(f"invalid sudoku cell: {digit!r}")
    return len(digits) != len(set(digits))


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether the filled cells of a 9x9 sudoku break no row, column or box rule."""
    rows = [list(row) for row in board]
    columns = [list(column) for column in zip(*board)]
    boxes = [
        [board[r + i][c + j] for i in range(3) for j in range(3)]
        for r in range(0, 9, 3)
        for c in range(0, 9, 3)
    ]
    return not any(_has_duplicates(group) for group in (*rows, *columns, *boxes))


def trap_rain_water(height_map: Sequence[Sequence[int]]) -> int:
    """Volume of water that a 2D elevation map can hold after rain."""
    m = len(height_map)
    n = len(height_map[0]) if m else 0
    heights = [list(row) for row in height_map]

    visited: set[tuple[int, int]] = set()
    border: list[tuple[int, int, int]] = []
    for i in range(m):
        for j in range(n):
            if i in (0, m - 1) or j in (0, n - 1):
                visited.add((i, j))
                heapq.heappush(border, (heights[i][j], i, j))

    total = 0
    while border:
        level, i, j = heapq.heappop(border)
        for di, dj in _DIRECTIONS:
            i2, j2 = i + di, j + dj
            if not (0 <= i2 < m and 0 <= j2 < n) or (i2, j2) in visited:
                continue
            visited.add((i2, j2))
            if heights[i2][j2] < level:
                total += level - heights[i2][j2]
                heights[i2][j2] = level
            heapq.heappush(border, (heights[i2][j2], i2, j2))
    return total


def rotate(matrix: MutableSequence[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def find_diagonal_order(mat: Sequence[Sequence[int]]) -> list[int]:
    """Read a matrix along its anti-diagonals, alternating upward and downward."""
    n = len(mat)
    m = len(mat[0]) if n else 0
    order: list[int] = []
    for d in range(n + m - 1):
        rows = range(max(0, d - m + 1), min(d, n - 1) + 1)
        if d % 2 == 0:
            rows = reversed(rows)
        order.extend(mat[i][d - i] for i in rows)
    return order


def sort_matrix(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Sort the diagonals of a square matrix.

    Diagonals in the bottom-left triangle, main diagonal included, are sorted
    in descending order; those in the top-right triangle in ascending order.
    """
    n = len(grid)
    result = [list(row) for row in grid]

    for start in range(n - 1):
        cells = [(start + k, k) for k in range(n - start)]
        values = sorted((result[i][j] for i, j in cells), reverse=True)
        for (i, j), value in zip(cells, values):
            result[i][j] = value

    for start in range(1, n):
        cells = [(k, start + k) for k in range(n - start)]
        values = sorted(result[i][j] for i, j in cells)
        for (i, j), value in zip(cells, values):
            result[i][j] = value

    return result


def first_complete_index(arr: Sequence[int], mat: Sequence[Sequence[int]]) -> int:
    """Smallest index in ``arr`` after which some row or column of ``mat`` is fully painted."""
    m = len(mat)
    n = len(mat[0])
    position = {value: (i, j) for i, row in enumerate(mat) for j, value in enumerate(row)}

    painted_rows = [0] * m
    painted_cols = [0] * n
    for index, value in enumerate(arr):
        i, j = position[value]
        painted_rows[i] += 1
        painted_cols[j] += 1
        if painted_rows[i] == n or painted_cols[j] == m:
            return index
    raise ValueError("no row or column is ever completely painted")