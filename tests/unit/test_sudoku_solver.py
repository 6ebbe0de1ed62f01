"""
Unit tests for Sudoku grid helpers and the solver.

Tests block geometry, move validation, solving, and solution counting.
"""
import pytest

from puzzle_arcade.sudoku import (
    block_dimensions,
    count_solutions,
    find_conflicts,
    format_grid,
    has_unique_solution,
    is_valid_move,
    solve_sudoku,
    validate_grid,
)
from puzzle_arcade.sudoku.grid import empty_grid


# ============================================================================
# Grid Geometry Tests
# ============================================================================

class TestBlockDimensions:
    """Test block shape derivation."""

    @pytest.mark.parametrize(
        "size, expected",
        [(9, (3, 3)), (6, (2, 3)), (4, (2, 2)), (16, (4, 4)), (8, (2, 4))],
    )
    def test_known_sizes(self, size: int, expected) -> None:
        assert block_dimensions(size) == expected

    def test_untileable_size_raises(self) -> None:
        with pytest.raises(ValueError):
            block_dimensions(7)

    def test_ragged_grid_rejected(self) -> None:
        grid = empty_grid(4)
        grid[2] = [None, None, None]
        with pytest.raises(ValueError, match="square"):
            validate_grid(grid)

    def test_out_of_range_value_rejected(self) -> None:
        grid = empty_grid(4)
        grid[0][0] = 5
        with pytest.raises(ValueError, match="outside"):
            validate_grid(grid)

    def test_format_grid_has_block_separators(self, classic_puzzle) -> None:
        lines = format_grid(classic_puzzle).splitlines()
        assert len(lines) == 11
        assert lines[0] == "5 3 . | . 7 . | . . ."
        assert set(lines[3]) == {"-"}


# ============================================================================
# Move Validation Tests
# ============================================================================

class TestIsValidMove:
    """Test row, column and block checks."""

    def test_value_allowed(self, classic_puzzle) -> None:
        assert is_valid_move(classic_puzzle, 0, 2, 4) is True

    def test_row_conflict(self, classic_puzzle) -> None:
        assert is_valid_move(classic_puzzle, 0, 2, 5) is False

    def test_column_conflict(self, classic_puzzle) -> None:
        assert is_valid_move(classic_puzzle, 0, 2, 8) is False

    def test_block_conflict(self, classic_puzzle) -> None:
        assert is_valid_move(classic_puzzle, 0, 2, 9) is False

    @pytest.mark.parametrize("value", [0, 10, -1])
    def test_out_of_range_value(self, classic_puzzle, value: int) -> None:
        assert is_valid_move(classic_puzzle, 0, 2, value) is False

    def test_six_by_six_block_is_two_by_three(self) -> None:
        """(1, 5) shares a 2x3 block with (0, 3) but not with (2, 3)."""
        grid = empty_grid(6)
        grid[0][3] = 4
        assert is_valid_move(grid, 1, 5, 4) is False
        grid = empty_grid(6)
        grid[2][3] = 4
        assert is_valid_move(grid, 1, 5, 4) is True

    def test_find_conflicts(self) -> None:
        grid = empty_grid(4)
        grid[0][0] = 1
        grid[0][3] = 1
        grid[3][3] = 2
        assert find_conflicts(grid) == {(0, 0), (0, 3)}


# ============================================================================
# Solver Tests
# ============================================================================

class TestSolveSudoku:
    """Test backtracking solver."""

    def test_solves_classic_puzzle(self, classic_puzzle, classic_solution) -> None:
        assert solve_sudoku(classic_puzzle) == classic_solution

    def test_input_not_modified(self, classic_puzzle) -> None:
        before = [list(row) for row in classic_puzzle]
        solve_sudoku(classic_puzzle)
        assert classic_puzzle == before

    def test_empty_grid_is_deterministic(self) -> None:
        """Row-major search with increasing values gives 1..9 in row 0."""
        solution = solve_sudoku(empty_grid(9))
        assert solution[0] == list(range(1, 10))
        assert solution == solve_sudoku(empty_grid(9))
        assert find_conflicts(solution) == set()

    def test_six_by_six(self, solved_6x6) -> None:
        puzzle = [list(row) for row in solved_6x6]
        puzzle[0] = [None] * 6
        puzzle[3][3] = None
        assert solve_sudoku(puzzle) == solved_6x6

    def test_unsatisfiable_returns_none(self) -> None:
        """Row 0 needs a 9 in the last column, which already holds one."""
        grid = empty_grid(9)
        grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, None]
        grid[1][8] = 9
        assert solve_sudoku(grid) is None
        assert count_solutions(grid) == 0

    def test_conflicting_givens_return_none(self) -> None:
        grid = empty_grid(9)
        grid[0][0] = 5
        grid[0][8] = 5
        assert solve_sudoku(grid) is None
        assert count_solutions(grid) == 0

    def test_full_grid_solves_to_itself(self, classic_solution) -> None:
        assert solve_sudoku(classic_solution) == classic_solution


# ============================================================================
# Solution Counting Tests
# ============================================================================

class TestCountSolutions:
    """Test capped solution counting."""

    def test_unique_puzzle(self, classic_puzzle) -> None:
        assert count_solutions(classic_puzzle) == 1
        assert has_unique_solution(classic_puzzle) is True

    def test_empty_grid_hits_cap(self) -> None:
        assert count_solutions(empty_grid(9)) == 2
        assert has_unique_solution(empty_grid(9)) is False

    def test_custom_limit(self) -> None:
        assert count_solutions(empty_grid(4), limit=1) == 1
        assert count_solutions(empty_grid(4), limit=5) == 5

    def test_zero_limit(self, classic_puzzle) -> None:
        assert count_solutions(classic_puzzle, limit=0) == 0

    def test_does_not_modify_input(self, classic_puzzle) -> None:
        before = [list(row) for row in classic_puzzle]
        count_solutions(classic_puzzle)
        assert classic_puzzle == before

    def test_two_solutions_detected(self, classic_solution) -> None:
        """Blanking a swappable rectangle leaves two completions."""
        puzzle = [list(row) for row in classic_solution]
        # rows 3-4, cols 5 and 8 hold 1/3 and 3/1
        for row in (3, 4):
            for col in (5, 8):
                puzzle[row][col] = None
        assert count_solutions(puzzle) == 2
        assert count_solutions(puzzle, limit=10) == 2
        assert has_unique_solution(puzzle) is False
