"""
Grid module for Sudoku.

Defines the grid type, block geometry, and the small helpers shared by
the solver, the generator and the session.
"""
import math
from typing import List, Optional, Tuple


# ============================================================================
# Types
# ============================================================================

Grid = List[List[Optional[int]]]
Position = Tuple[int, int]


# ============================================================================
# Block Geometry
# ============================================================================

def block_dimensions(n: int) -> Tuple[int, int]:
    """
    Derive block dimensions for a grid of size n.

    9 gives 3x3 blocks and 6 gives 2 rows by 3 columns. Other perfect
    squares use square blocks; anything else uses floor(sqrt(n)) rows.

    Args:
        n: Grid size.

    Returns:
        Tuple of (block_rows, block_cols).

    Raises:
        ValueError: If no block shape tiles the grid.
    """
    if n == 9:
        return 3, 3
    if n == 6:
        return 2, 3
    if n < 1:
        raise ValueError("Grid size must be positive")
    root = math.isqrt(n)
    if root * root == n:
        return root, root
    if n % root != 0:
        raise ValueError(f"Cannot derive block dimensions for size {n}")
    return root, n // root


def block_origin(row: int, col: int, block_rows: int, block_cols: int) -> Position:
    """Top-left cell of the block containing (row, col)."""
    return (row // block_rows) * block_rows, (col // block_cols) * block_cols


# ============================================================================
# Grid Helpers
# ============================================================================

def empty_grid(n: int) -> Grid:
    """Create an n x n grid with every cell empty."""
    return [[None] * n for _ in range(n)]


def clone_grid(grid: Grid) -> Grid:
    """Copy a grid row by row."""
    return [list(row) for row in grid]


def validate_grid(grid: Grid) -> int:
    """
    Check that a grid is square, tileable and holds values in [1, n].

    Args:
        grid: Grid to check.

    Returns:
        The grid size n.

    Raises:
        ValueError: On any dimension or value mismatch.
    """
    n = len(grid)
    if n == 0:
        raise ValueError("Grid must not be empty")
    for index, row in enumerate(grid):
        if len(row) != n:
            raise ValueError(
                f"Grid must be square: row {index} has {len(row)} cells, expected {n}"
            )
    block_dimensions(n)
    for row in grid:
        for value in row:
            if value is not None and not 1 <= value <= n:
                raise ValueError(f"Cell value {value} outside 1..{n}")
    return n


def find_empty(grid: Grid) -> Optional[Position]:
    """First empty cell in row-major order, or None if the grid is full."""
    for row_index, row in enumerate(grid):
        for col_index, value in enumerate(row):
            if value is None:
                return row_index, col_index
    return None


def empty_positions(grid: Grid) -> List[Position]:
    """All empty cells in row-major order."""
    return [
        (row_index, col_index)
        for row_index, row in enumerate(grid)
        for col_index, value in enumerate(row)
        if value is None
    ]


def format_grid(grid: Grid) -> str:
    """Render a grid as text with block separators."""
    n = len(grid)
    block_rows, block_cols = block_dimensions(n)
    lines = []
    for row_index, row in enumerate(grid):
        if row_index and row_index % block_rows == 0:
            lines.append("-" * (2 * n + 2 * (n // block_cols - 1) - 1))
        cells = []
        for col_index, value in enumerate(row):
            if col_index and col_index % block_cols == 0:
                cells.append("|")
            cells.append("." if value is None else str(value))
        lines.append(" ".join(cells))
    return "\n".join(lines)
