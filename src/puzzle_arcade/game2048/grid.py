"""
Grid module for 2048.

Pure functions for sliding and merging tiles, spawning random tiles and
detecting win/lose states. Grids are never modified in place.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..rng import RandomSource, resolve_rng


# ============================================================================
# Constants
# ============================================================================

GRID_SIZE = 4
WINNING_TILE = 2048
FOUR_PROBABILITY = 0.1

Row = List[Optional[int]]
Grid2048 = List[Row]
Position = Tuple[int, int]


class Direction(str, Enum):
    """Move directions, in the order used for iteration and tie-breaking."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass
class MoveResult:
    """
    Outcome of a move.

    Attributes:
        grid: Grid after sliding and merging (no tile spawned).
        score: Sum of the merged tile values.
        moved: Whether any cell changed.
    """

    grid: Grid2048
    score: int
    moved: bool


# ============================================================================
# Grid Helpers (Low-level)
# ============================================================================

def create_empty_grid() -> Grid2048:
    return [[None] * GRID_SIZE for _ in range(GRID_SIZE)]


def clone_grid(grid: Grid2048) -> Grid2048:
    return [list(row) for row in grid]


def validate_grid(grid: Grid2048) -> None:
    """
    Check that a grid is 4x4 and holds only powers of two >= 2.

    Raises:
        ValueError: On a dimension mismatch or an invalid tile.
    """
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}")
    for row in grid:
        for value in row:
            if value is not None and (value < 2 or value & (value - 1)):
                raise ValueError(f"Invalid tile value {value}")


def empty_cells(grid: Grid2048) -> List[Position]:
    """Empty positions in row-major order."""
    return [
        (row, col)
        for row in range(GRID_SIZE)
        for col in range(GRID_SIZE)
        if grid[row][col] is None
    ]


def max_tile(grid: Grid2048) -> int:
    """Largest tile on the board, 0 when empty."""
    return max((value for row in grid for value in row if value is not None), default=0)


# ============================================================================
# Sliding and Merging
# ============================================================================

def slide_row(row: Row) -> Tuple[Row, int]:
    """
    Slide a row toward index 0, merging equal neighbors once.

    A merged tile cannot merge again in the same slide, so [2, 2, 2, 2]
    becomes [4, 4, None, None].

    Args:
        row: Row of 4 values.

    Returns:
        Tuple of (new row, score gained from merges).
    """
    tiles = [value for value in row if value is not None]
    result: Row = []
    score = 0
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            merged = tiles[i] * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(tiles[i])
            i += 1
    result.extend([None] * (len(row) - len(result)))
    return result, score


def move(grid: Grid2048, direction: Direction) -> MoveResult:
    """
    Slide every row or column in a direction.

    Right slides toward column 3 and down toward row 3.

    Args:
        grid: Current grid.
        direction: Direction (or its string value).

    Returns:
        MoveResult with the new grid, the score gained, and whether
        anything changed.
    """
    direction = Direction(direction)
    new_grid = create_empty_grid()
    total_score = 0

    for index in range(GRID_SIZE):
        if direction in (Direction.LEFT, Direction.RIGHT):
            line = list(grid[index])
        else:
            line = [grid[row][index] for row in range(GRID_SIZE)]

        reverse = direction in (Direction.RIGHT, Direction.DOWN)
        if reverse:
            line.reverse()
        slid, score = slide_row(line)
        total_score += score
        if reverse:
            slid.reverse()

        if direction in (Direction.LEFT, Direction.RIGHT):
            new_grid[index] = slid
        else:
            for row in range(GRID_SIZE):
                new_grid[row][index] = slid[row]

    moved = new_grid != grid
    return MoveResult(new_grid, total_score, moved)


# ============================================================================
# Tile Spawning
# ============================================================================

def add_random_tile(grid: Grid2048, rng: RandomSource = None) -> Grid2048:
    """
    Place a 2 (90%) or a 4 (10%) on a uniformly chosen empty cell.

    Returns:
        New grid; an unchanged copy when the board is full.
    """
    new_grid = clone_grid(grid)
    empty = empty_cells(new_grid)
    if not empty:
        return new_grid
    generator = resolve_rng(rng)
    row, col = empty[int(generator.integers(len(empty)))]
    new_grid[row][col] = 4 if generator.random() < FOUR_PROBABILITY else 2
    return new_grid


def init_game(rng: RandomSource = None) -> Grid2048:
    """New grid with exactly two random tiles."""
    generator = resolve_rng(rng)
    grid = add_random_tile(create_empty_grid(), generator)
    return add_random_tile(grid, generator)


# ============================================================================
# State Queries (High-level)
# ============================================================================

def can_move(grid: Grid2048) -> bool:
    """
    True if any cell is empty or has an equal right or down neighbor.
    """
    if empty_cells(grid):
        return True
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = grid[row][col]
            if col + 1 < GRID_SIZE and grid[row][col + 1] == value:
                return True
            if row + 1 < GRID_SIZE and grid[row + 1][col] == value:
                return True
    return False


def has_won(grid: Grid2048) -> bool:
    """True if any tile equals 2048."""
    return any(value == WINNING_TILE for row in grid for value in row)


def format_grid(grid: Grid2048) -> str:
    """Render a grid as right-aligned text columns."""
    return "\n".join(
        " ".join(f"{'.' if value is None else value:>5}" for value in row)
        for row in grid
    )
