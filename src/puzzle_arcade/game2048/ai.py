"""
Hint AI for 2048.

Scores each legal move with a depth-limited expectimax search over random
tile spawns and a static board heuristic.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from .grid import (
    DIRECTIONS,
    FOUR_PROBABILITY,
    GRID_SIZE,
    Direction,
    Grid2048,
    empty_cells,
    max_tile,
    move,
)


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

SEARCH_DEPTH = 2

EMPTY_CELL_WEIGHT = 100
ORIGIN_CORNER_BONUS = 2000
OTHER_CORNER_BONUS = 1000
MONOTONIC_PAIR_WEIGHT = 10
MERGE_PAIR_WEIGHT = 2

CORNERS = ((0, 0), (0, GRID_SIZE - 1), (GRID_SIZE - 1, 0), (GRID_SIZE - 1, GRID_SIZE - 1))


@dataclass
class Hint:
    """
    Suggested move.

    Attributes:
        direction: Move to play.
        score: Expectimax value of the move.
        reason: Short human-readable explanation.
    """

    direction: Direction
    score: float
    reason: str


# ============================================================================
# Heuristic
# ============================================================================

def max_tile_in_corner(grid: Grid2048) -> bool:
    """Check if the largest tile sits in any corner."""
    largest = max_tile(grid)
    return largest > 0 and any(grid[row][col] == largest for row, col in CORNERS)


def evaluate_grid(grid: Grid2048) -> float:
    """
    Static evaluation of a board.

    Sums 100 per empty cell, a corner bonus for the largest tile (2000 at
    the top-left origin, 1000 at any other corner), 10 per adjacent pair
    that does not increase along a row or column (empty counts as 0), and
    twice the value of every horizontally adjacent equal pair.
    """
    score = float(EMPTY_CELL_WEIGHT * len(empty_cells(grid)))

    largest = max_tile(grid)
    if largest > 0:
        if grid[0][0] == largest:
            score += ORIGIN_CORNER_BONUS
        elif any(grid[row][col] == largest for row, col in CORNERS[1:]):
            score += OTHER_CORNER_BONUS

    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = grid[row][col] or 0
            if col + 1 < GRID_SIZE and value >= (grid[row][col + 1] or 0):
                score += MONOTONIC_PAIR_WEIGHT
            if row + 1 < GRID_SIZE and value >= (grid[row + 1][col] or 0):
                score += MONOTONIC_PAIR_WEIGHT

    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE - 1):
            value = grid[row][col]
            if value is not None and value == grid[row][col + 1]:
                score += MERGE_PAIR_WEIGHT * value

    return score


# ============================================================================
# Search
# ============================================================================

def expectimax(grid: Grid2048, depth: int, chance: bool) -> float:
    """
    Expectimax value of a board.

    Chance nodes average over every empty cell, weighting a spawned 2 by
    0.9 and a spawned 4 by 0.1. Max nodes take the best legal move. Depth
    zero, a full board at a chance node, and a stuck board at a max node
    fall back to the static evaluation.

    Args:
        grid: Board to evaluate.
        depth: Remaining plies.
        chance: Whether this is a tile-spawn node.

    Returns:
        Estimated value of the board.
    """
    if depth <= 0:
        return evaluate_grid(grid)

    if chance:
        empty = empty_cells(grid)
        if not empty:
            return evaluate_grid(grid)
        total = 0.0
        for row, col in empty:
            for tile, probability in ((2, 1 - FOUR_PROBABILITY), (4, FOUR_PROBABILITY)):
                child = [list(line) for line in grid]
                child[row][col] = tile
                total += probability * expectimax(child, depth - 1, chance=False)
        return total / len(empty)

    best: Optional[float] = None
    for direction in DIRECTIONS:
        result = move(grid, direction)
        if not result.moved:
            continue
        value = expectimax(result.grid, depth - 1, chance=True)
        if best is None or value > best:
            best = value
    if best is None:
        return evaluate_grid(grid)
    return best


def _describe(grid: Grid2048, new_grid: Grid2048, score_gained: int) -> str:
    """Explain a move from its merges, opened cells and corner position."""
    parts: List[str] = []
    merges = score_gained // 2
    if merges:
        parts.append(f"merges {merges}")
    opened = len(empty_cells(new_grid)) - len(empty_cells(grid))
    if opened > 0:
        parts.append(f"opens {opened} cell{'s' if opened > 1 else ''}")
    if max_tile_in_corner(new_grid):
        parts.append("keeps max tile in corner")
    if not parts:
        return "Best available position"
    text = ", ".join(parts)
    return text[0].upper() + text[1:]


def calculate_best_move(grid: Grid2048, depth: int = SEARCH_DEPTH) -> Optional[Hint]:
    """
    Pick the move with the highest expectimax value.

    Directions that leave the grid unchanged are skipped. Ties go to the
    earliest direction in up, down, left, right order.

    Args:
        grid: Current board.
        depth: Search depth below each move (first ply is a chance node).

    Returns:
        Hint for the best move, or None if no move changes the grid.
    """
    best: Optional[Hint] = None
    for direction in DIRECTIONS:
        result = move(grid, direction)
        if not result.moved:
            continue
        value = expectimax(result.grid, depth, chance=True)
        if best is None or value > best.score:
            best = Hint(direction, value, _describe(grid, result.grid, result.score))

    if best is None:
        logger.debug("No move changes the grid")
    else:
        logger.debug("Best move %s scored %.1f", best.direction.value, best.score)
    return best
