"""
Solver module for Sudoku.

Implements move validation, the backtracking solver and the capped
solution counter used to verify puzzle uniqueness.
"""
from typing import Callable, Iterable, List, Optional, Set

from .grid import (
    Grid,
    Position,
    block_dimensions,
    block_origin,
    clone_grid,
    empty_positions,
    validate_grid,
)


# ============================================================================
# Move Validation
# ============================================================================

def is_valid_move(grid: Grid, row: int, col: int, value: int) -> bool:
    """
    Check whether a value may be placed at (row, col).

    The target cell itself is included in the scan, so callers testing an
    existing entry must clear it first.

    Args:
        grid: Current grid.
        row: Row index (0-based).
        col: Column index (0-based).
        value: Candidate value.

    Returns:
        True if the value is in range and absent from the row, column
        and block.
    """
    n = len(grid)
    if not 1 <= value <= n:
        return False
    if value in grid[row]:
        return False
    if any(grid[r][col] == value for r in range(n)):
        return False
    block_rows, block_cols = block_dimensions(n)
    top, left = block_origin(row, col, block_rows, block_cols)
    for r in range(top, top + block_rows):
        for c in range(left, left + block_cols):
            if grid[r][c] == value:
                return False
    return True


def find_conflicts(grid: Grid) -> Set[Position]:
    """
    Find filled cells whose value is duplicated in a row, column or block.

    Args:
        grid: Grid to inspect.

    Returns:
        Set of (row, col) positions in conflict.
    """
    work = clone_grid(grid)
    conflicts = set()
    for row, values in enumerate(grid):
        for col, value in enumerate(values):
            if value is None:
                continue
            work[row][col] = None
            if not is_valid_move(work, row, col, value):
                conflicts.add((row, col))
            work[row][col] = value
    return conflicts


# ============================================================================
# Candidate Tracking (Low-level)
# ============================================================================

class CandidateTracker:
    """
    Bitmask bookkeeping of the values used per row, column and block.

    Bit v of a mask is set when value v is already present.
    """

    def __init__(self, grid: Grid) -> None:
        self.n = len(grid)
        self.block_rows, self.block_cols = block_dimensions(self.n)
        self.full_mask = (1 << (self.n + 1)) - 2
        self.rows = [0] * self.n
        self.cols = [0] * self.n
        self.blocks = [0] * self.n
        self.consistent = True

        for row, values in enumerate(grid):
            for col, value in enumerate(values):
                if value is None:
                    continue
                if not self.candidates(row, col) & (1 << value):
                    self.consistent = False
                self.place(row, col, value)

    def _block_index(self, row: int, col: int) -> int:
        blocks_per_row = self.n // self.block_cols
        return (row // self.block_rows) * blocks_per_row + col // self.block_cols

    def candidates(self, row: int, col: int) -> int:
        """Mask of values still allowed at (row, col)."""
        used = self.rows[row] | self.cols[col] | self.blocks[self._block_index(row, col)]
        return self.full_mask & ~used

    def place(self, row: int, col: int, value: int) -> None:
        bit = 1 << value
        self.rows[row] |= bit
        self.cols[col] |= bit
        self.blocks[self._block_index(row, col)] |= bit

    def remove(self, row: int, col: int, value: int) -> None:
        bit = ~(1 << value)
        self.rows[row] &= bit
        self.cols[col] &= bit
        self.blocks[self._block_index(row, col)] &= bit


def _bit_count(mask: int) -> int:
    return bin(mask).count("1")


# ============================================================================
# Solving
# ============================================================================

def fill_grid(grid: Grid, value_order: Callable[[], Iterable[int]]) -> bool:
    """
    Fill the empty cells of a grid in place by row-major backtracking.

    Args:
        grid: Grid to complete; mutated.
        value_order: Callable returning the candidate values to try for
            the next empty cell, in order.

    Returns:
        True if the grid was completed, False if no completion exists.
    """
    tracker = CandidateTracker(grid)
    if not tracker.consistent:
        return False
    empties = empty_positions(grid)

    def backtrack(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        allowed = tracker.candidates(row, col)
        for value in value_order():
            if not allowed & (1 << value):
                continue
            grid[row][col] = value
            tracker.place(row, col, value)
            if backtrack(index + 1):
                return True
            tracker.remove(row, col, value)
            grid[row][col] = None
        return False

    return backtrack(0)


def solve_sudoku(grid: Grid) -> Optional[Grid]:
    """
    Solve a Sudoku puzzle by backtracking.

    Empty cells are visited in row-major order and values 1..n are tried
    in increasing order, so the result is deterministic.

    Args:
        grid: Puzzle to solve; not modified.

    Returns:
        The first solution found, or None if the grid is unsatisfiable.
    """
    n = validate_grid(grid)
    solution = clone_grid(grid)
    values = list(range(1, n + 1))
    if fill_grid(solution, lambda: values):
        return solution
    return None


def count_solutions(grid: Grid, limit: int = 2) -> int:
    """
    Count solutions of a puzzle, stopping once the count reaches limit.

    Branches on the empty cell with the fewest candidates; the capped count
    does not depend on branching order.

    Args:
        grid: Puzzle to examine; not modified.
        limit: Count at which the search stops.

    Returns:
        Number of solutions found, at most limit.
    """
    validate_grid(grid)
    if limit <= 0:
        return 0
    tracker = CandidateTracker(grid)
    if not tracker.consistent:
        return 0
    remaining: List[Position] = empty_positions(grid)
    count = 0

    def backtrack() -> None:
        nonlocal count
        if not remaining:
            count += 1
            return

        best_index = 0
        best_mask = 0
        best_size = tracker.n + 1
        for index, (row, col) in enumerate(remaining):
            mask = tracker.candidates(row, col)
            size = _bit_count(mask)
            if size < best_size:
                best_index, best_mask, best_size = index, mask, size
                if size == 0:
                    return

        row, col = remaining.pop(best_index)
        for value in range(1, tracker.n + 1):
            if not best_mask & (1 << value):
                continue
            tracker.place(row, col, value)
            backtrack()
            tracker.remove(row, col, value)
            if count >= limit:
                break
        remaining.insert(best_index, (row, col))

    backtrack()
    return count


def has_unique_solution(grid: Grid) -> bool:
    """Check that a puzzle has exactly one completion."""
    return count_solutions(grid, 2) == 1
