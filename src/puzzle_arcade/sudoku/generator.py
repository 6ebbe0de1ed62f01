"""
Generator module for Sudoku.

Builds a random solved grid, then clears cells one at a time while the
puzzle keeps a unique solution.
"""
import logging
import math
from enum import Enum
from typing import Dict, List, Union

from ..rng import RandomSource, resolve_rng
from .grid import Grid, clone_grid, empty_grid
from .solver import count_solutions, fill_grid


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Difficulty(str, Enum):
    """Puzzle difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


CLUES_BY_DIFFICULTY_9X9: Dict[Difficulty, int] = {
    Difficulty.EASY: 36,
    Difficulty.MEDIUM: 30,
    Difficulty.HARD: 26,
}

SUPPORTED_SIZES = (6, 9)


def parse_difficulty(difficulty: Union[str, Difficulty]) -> Difficulty:
    """Convert a difficulty name into a Difficulty, raising ValueError if unknown."""
    try:
        return Difficulty(difficulty)
    except ValueError:
        names = ", ".join(level.value for level in Difficulty)
        raise ValueError(
            f"Unknown difficulty {difficulty!r} (expected one of: {names})"
        ) from None


def target_clue_count(difficulty: Union[str, Difficulty], size: int) -> int:
    """
    Number of clues to aim for when clearing cells.

    9x9 grids use fixed counts per difficulty; other sizes keep half the
    cells, never fewer than 6.
    """
    level = parse_difficulty(difficulty)
    if size == 9:
        return CLUES_BY_DIFFICULTY_9X9[level]
    return max(math.floor(size * size * 0.5), 6)


# ============================================================================
# Generation
# ============================================================================

def generate_full_solution(size: int = 9, rng: RandomSource = None) -> Grid:
    """
    Build a random solved grid.

    Backtracks over empty cells in row-major order, trying a fresh uniform
    permutation of 1..size at every cell.

    Args:
        size: Grid size.
        rng: Random source.

    Returns:
        A fully solved grid.
    """
    generator = resolve_rng(rng)
    grid = empty_grid(size)

    def shuffled_values() -> List[int]:
        return [int(value) + 1 for value in generator.permutation(size)]

    if not fill_grid(grid, shuffled_values):
        raise ValueError(f"No solved grid exists for size {size}")
    return grid


def generate_sudoku(
    difficulty: Union[str, Difficulty] = Difficulty.EASY,
    size: int = 9,
    rng: RandomSource = None,
) -> Grid:
    """
    Generate a puzzle with a unique solution.

    Cells are visited in random order; each is cleared only if the puzzle
    still has exactly one solution afterwards. Generation stops once the
    target clue count is reached, or when every cell has been tried, in
    which case the puzzle may hold more clues than the target.

    Args:
        difficulty: "easy", "medium" or "hard".
        size: Grid size (6 or 9).
        rng: Random source.

    Returns:
        Puzzle grid with None for cleared cells.
    """
    target = target_clue_count(difficulty, size)
    generator = resolve_rng(rng)
    puzzle = clone_grid(generate_full_solution(size, generator))

    total = size * size
    clues = total
    for index in generator.permutation(total):
        if clues <= target:
            break
        row, col = divmod(int(index), size)
        backup = puzzle[row][col]
        puzzle[row][col] = None
        if count_solutions(puzzle, 2) != 1:
            puzzle[row][col] = backup
        else:
            clues -= 1

    logger.debug(
        "Generated %dx%d %s puzzle with %d clues (target %d)",
        size, size, parse_difficulty(difficulty).value, clues, target,
    )
    return puzzle
