"""
Grid module for Minesweeper.

Pure functions over a mine field: mine placement with a safe first click,
flood-fill reveal, chording, flagging, and win/lose detection. Every
function returns a new grid and leaves its input untouched.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..rng import RandomSource, resolve_rng
from .cell import Cell


logger = logging.getLogger(__name__)

MineGrid = List[List[Cell]]
Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.max_mines
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def max_mines(self) -> int:
        """Most mines that still leave room for any first click's safe zone."""
        return self.total_cells - min(self.rows, 3) * min(self.cols, 3)


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


# ============================================================================
# Neighbor Utilities (Low-level)
# ============================================================================

def neighbors(row: int, col: int, rows: int, cols: int) -> Iterator[Position]:
    """Yield the in-bounds positions of the up to 8 cells around (row, col)."""
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < rows and 0 <= new_col < cols:
                yield new_row, new_col


def copy_grid(grid: MineGrid) -> MineGrid:
    """Deep copy a grid cell by cell."""
    return [[cell.copy() for cell in row] for row in grid]


def grid_shape(grid: MineGrid) -> Tuple[int, int]:
    """
    Return (rows, cols), checking that the grid is rectangular.

    Raises:
        ValueError: If the grid is empty or its rows differ in length.
    """
    rows = len(grid)
    if rows == 0 or len(grid[0]) == 0:
        raise ValueError("Grid must have at least one cell")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("Grid rows must all have the same length")
    return rows, cols


def _check_position(grid: MineGrid, row: int, col: int) -> None:
    rows, cols = grid_shape(grid)
    if not (0 <= row < rows and 0 <= col < cols):
        raise ValueError(f"Position ({row}, {col}) outside {rows}x{cols} grid")


def safe_zone(first_click: Position) -> Set[Position]:
    """The clicked cell and its 8 neighbors; off-board entries are harmless."""
    first_row, first_col = first_click
    return {
        (first_row + delta_row, first_col + delta_col)
        for delta_row in (-1, 0, 1)
        for delta_col in (-1, 0, 1)
    }


# ============================================================================
# Grid Creation
# ============================================================================

def create_grid(
    rows: int,
    cols: int,
    mine_count: int,
    first_click: Optional[Position] = None,
    rng: RandomSource = None,
) -> MineGrid:
    """
    Create a mine field.

    Mines are placed uniformly at random among cells outside the safe zone
    around the first click, then adjacent counts are computed once.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Mines to place.
        first_click: Optional (row, col) that must be safe along with its
            neighbors.
        rng: Random source.

    Returns:
        New grid with all cells hidden.

    Raises:
        ValueError: If the board cannot hold the requested mines.
    """
    if rows < 1 or cols < 1:
        raise ValueError("Board dimensions must be positive")
    if mine_count < 0:
        raise ValueError("Number of mines cannot be negative")

    grid = [[Cell() for _ in range(cols)] for _ in range(rows)]
    excluded = safe_zone(first_click) if first_click is not None else set()
    candidates = [
        (row, col)
        for row in range(rows)
        for col in range(cols)
        if (row, col) not in excluded
    ]
    if mine_count > len(candidates):
        raise ValueError(
            f"Too many mines: {mine_count} requested, {len(candidates)} cells available"
        )

    generator = resolve_rng(rng)
    for index in generator.choice(len(candidates), size=mine_count, replace=False):
        row, col = candidates[int(index)]
        grid[row][col].is_mine = True

    for row in range(rows):
        for col in range(cols):
            if grid[row][col].is_mine:
                continue
            grid[row][col].adjacent_mines = sum(
                1 for r, c in neighbors(row, col, rows, cols) if grid[r][c].is_mine
            )

    logger.debug(
        "Created %dx%d grid with %d mines (first click %s)",
        rows, cols, mine_count, first_click,
    )
    return grid


# ============================================================================
# Game Actions (Mid-level)
# ============================================================================

def _flood(grid: MineGrid, row: int, col: int) -> None:
    """Reveal from (row, col) in place, expanding through zero-count cells."""
    rows, cols = len(grid), len(grid[0])
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        cell = grid[r][c]
        if cell.is_revealed or cell.is_flagged:
            continue
        cell.is_revealed = True
        if not cell.is_mine and cell.adjacent_mines == 0:
            stack.extend(neighbors(r, c, rows, cols))


def reveal_cell(grid: MineGrid, row: int, col: int) -> MineGrid:
    """
    Reveal a cell, flooding outward from zero-count cells.

    Flagged and already revealed cells are never touched.

    Args:
        grid: Current grid.
        row: Row index.
        col: Column index.

    Returns:
        New grid with the reveal applied.
    """
    _check_position(grid, row, col)
    new_grid = copy_grid(grid)
    _flood(new_grid, row, col)
    return new_grid


def toggle_flag(grid: MineGrid, row: int, col: int) -> MineGrid:
    """
    Flip the flag on a hidden cell.

    Returns:
        The same grid if the cell is revealed, otherwise a new grid.
    """
    _check_position(grid, row, col)
    if grid[row][col].is_revealed:
        return grid
    new_grid = copy_grid(grid)
    new_grid[row][col].is_flagged = not new_grid[row][col].is_flagged
    return new_grid


def count_adjacent_flags(grid: MineGrid, row: int, col: int) -> int:
    """Count flagged cells adjacent to a position."""
    rows, cols = grid_shape(grid)
    return sum(1 for r, c in neighbors(row, col, rows, cols) if grid[r][c].is_flagged)


def can_chord(grid: MineGrid, row: int, col: int) -> bool:
    """A chord needs a revealed numbered cell with exactly that many adjacent flags."""
    cell = grid[row][col]
    if not cell.is_revealed or cell.is_mine or cell.adjacent_mines == 0:
        return False
    return count_adjacent_flags(grid, row, col) == cell.adjacent_mines


def chord_reveal(grid: MineGrid, row: int, col: int) -> MineGrid:
    """
    Reveal every unflagged neighbor of a satisfied numbered cell.

    Each neighbor is revealed with the same flood semantics as
    reveal_cell. When the chord is not allowed the grid is copied unchanged.
    """
    _check_position(grid, row, col)
    new_grid = copy_grid(grid)
    if not can_chord(grid, row, col):
        return new_grid
    rows, cols = len(grid), len(grid[0])
    for r, c in neighbors(row, col, rows, cols):
        _flood(new_grid, r, c)
    return new_grid


# ============================================================================
# State Queries (High-level)
# ============================================================================

def check_win(grid: MineGrid) -> bool:
    """True iff every non-mine cell is revealed."""
    return all(cell.is_mine or cell.is_revealed for row in grid for cell in row)


def check_lose(grid: MineGrid) -> bool:
    """True iff some mine has been revealed."""
    return any(cell.is_mine and cell.is_revealed for row in grid for cell in row)


def reveal_all_mines(grid: MineGrid) -> MineGrid:
    """New grid with every mine revealed; non-mine cells are unchanged."""
    new_grid = copy_grid(grid)
    for row in new_grid:
        for cell in row:
            if cell.is_mine:
                cell.is_revealed = True
    return new_grid


def count_flags(grid: MineGrid) -> int:
    """Number of flagged cells."""
    return sum(1 for row in grid for cell in row if cell.is_flagged)


def count_mines(grid: MineGrid) -> int:
    """Number of mine cells."""
    return sum(1 for row in grid for cell in row if cell.is_mine)
