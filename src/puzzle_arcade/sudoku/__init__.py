"""
Sudoku module.

Provides puzzle generation with unique solutions, move validation,
backtracking solving, and a stateful session with notes and history.
"""
from .grid import Grid, block_dimensions, clone_grid, format_grid, validate_grid
from .solver import (
    count_solutions,
    find_conflicts,
    has_unique_solution,
    is_valid_move,
    solve_sudoku,
)
from .generator import (
    CLUES_BY_DIFFICULTY_9X9,
    Difficulty,
    generate_full_solution,
    generate_sudoku,
    target_clue_count,
)
from .session import CheckResult, MAX_HISTORY_SIZE, SudokuSession

__all__ = [
    "Grid",
    "block_dimensions",
    "clone_grid",
    "format_grid",
    "validate_grid",
    "count_solutions",
    "find_conflicts",
    "has_unique_solution",
    "is_valid_move",
    "solve_sudoku",
    "CLUES_BY_DIFFICULTY_9X9",
    "Difficulty",
    "generate_full_solution",
    "generate_sudoku",
    "target_clue_count",
    "CheckResult",
    "MAX_HISTORY_SIZE",
    "SudokuSession",
]
