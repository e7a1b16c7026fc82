"""Counting and cost problems over stairs, houses, grids and triangles."""

from __future__ import annotations

from functools import lru_cache
from math import inf
from typing import Sequence

Grid = Sequence[Sequence[int]]


def _dimensions(grid: Grid) -> tuple[int, int]:
    """Return (rows, columns) of a non-empty grid, or raise ValueError."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    return len(grid), len(grid[0])


def climb_stairs(n: int) -> int:
    """Number of ways to climb n stairs taking one or two steps at a time."""
    if n <= 1:
        return 1
    prev2, prev1 = 1, 1
    for _ in range(2, n + 1):
        prev2, prev1 = prev1, prev1 + prev2
    return prev1


def rob(nums: Sequence[int]) -> int:
    """Largest sum of values taken from a row with no two adjacent."""
    robbed, skipped = 0, 0
    for value in nums:
        robbed, skipped = skipped + value, max(skipped, robbed)
    return max(robbed, skipped)


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths from corner to corner of an m by n grid."""
    if m <= 0 or n <= 0:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(1, m):
        for j in range(1, n):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_with_obstacles_memo(grid: Grid) -> int:
    """Count paths avoiding cells marked 1, by memoised recursion."""
    rows, cols = _dimensions(grid)

    @lru_cache(maxsize=None)
    def count(i: int, j: int) -> int:
        if i < 0 or j < 0:
            return 0
        if grid[i][j] == 1:
            return 0
        if i == 0 and j == 0:
            return 1
        return count(i - 1, j) + count(i, j - 1)

    return count(rows - 1, cols - 1)


def unique_paths_with_obstacles_table(grid: Grid) -> int:
    """Count paths avoiding cells marked 1, filling a full table."""
    rows, cols = _dimensions(grid)
    table = [[0] * cols for _ in range(rows)]
    for i, grid_row in enumerate(grid):
        for j, cell in enumerate(grid_row):
            if cell == 1:
                table[i][j] = 0
            elif i == 0 and j == 0:
                table[i][j] = 1
            else:
                up = table[i - 1][j] if i > 0 else 0
                left = table[i][j - 1] if j > 0 else 0
                table[i][j] = up + left
    return table[rows - 1][cols - 1]


def unique_paths_with_obstacles_compact(grid: Grid) -> int:
    """Count paths avoiding cells marked 1, keeping one row at a time."""
    _, cols = _dimensions(grid)
    if grid[0][0] == 1:
        return 0
    prev = [0] * cols
    for i, grid_row in enumerate(grid):
        current = [0] * cols
        for j, cell in enumerate(grid_row):
            if cell == 1:
                continue
            if i == 0 and j == 0:
                current[j] = 1
                continue
            up = prev[j] if i > 0 else 0
            left = current[j - 1] if j > 0 else 0
            current[j] = up + left
        prev = current
    return prev[-1]


def min_path_sum_memo(grid: Grid) -> int:
    """Smallest right/down path sum from corner to corner, by memoised recursion."""
    rows, cols = _dimensions(grid)

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> float:
        if i == 0 and j == 0:
            return grid[0][0]
        up = grid[i][j] + best(i - 1, j) if i > 0 else inf
        left = grid[i][j] + best(i, j - 1) if j > 0 else inf
        return min(up, left)

    return int(best(rows - 1, cols - 1))


def min_path_sum_table(grid: Grid) -> int:
    """Smallest right/down path sum, filling a full table."""
    rows, cols = _dimensions(grid)
    table: list[list[float]] = [[0] * cols for _ in range(rows)]
    for i, grid_row in enumerate(grid):
        for j, cell in enumerate(grid_row):
            if i == 0 and j == 0:
                table[i][j] = cell
                continue
            up = cell + table[i - 1][j] if i > 0 else inf
            left = cell + table[i][j - 1] if j > 0 else inf
            table[i][j] = min(up, left)
    return int(table[rows - 1][cols - 1])


def min_path_sum_compact(grid: Grid) -> int:
    """Smallest right/down path sum, keeping one row at a time."""
    _, cols = _dimensions(grid)
    prev: list[float] = [0] * cols
    for i, grid_row in enumerate(grid):
        current: list[float] = [0] * cols
        for j, cell in enumerate(grid_row):
            if i == 0 and j == 0:
                current[j] = cell
                continue
            up = cell + prev[j] if i > 0 else inf
            left = cell + current[j - 1] if j > 0 else inf
            current[j] = min(up, left)
        prev = current
    return int(prev[-1])


def _check_triangle(triangle: Grid) -> int:
    if not triangle:
        raise ValueError("triangle must have at least one row")
    return len(triangle)


def minimum_total_memo(triangle: Grid) -> int:
    """Smallest top-to-bottom path sum through a triangle, by memoised recursion."""
    depth = _check_triangle(triangle)

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> int:
        if i == depth - 1:
            return triangle[i][j]
        return triangle[i][j] + min(best(i + 1, j), best(i + 1, j + 1))

    return best(0, 0)


def minimum_total_table(triangle: Grid) -> int:
    """Smallest top-to-bottom path sum through a triangle, filling a full table."""
    depth = _check_triangle(triangle)
    table = [[0] * depth for _ in range(depth)]
    table[depth - 1] = list(triangle[depth - 1][:depth])
    for i in range(depth - 2, -1, -1):
        below = table[i + 1]
        for j in range(i, -1, -1):
            table[i][j] = triangle[i][j] + min(below[j], below[j + 1])
    return table[0][0]


def minimum_total_compact(triangle: Grid) -> int:
    """Smallest top-to-bottom path sum through a triangle, keeping one row."""
    depth = _check_triangle(triangle)
    front = list(triangle[depth - 1][:depth])
    for row in reversed(triangle[:-1]):
        front = [value + min(front[j], front[j + 1]) for j, value in enumerate(row)]
    return front[0]