"""
Unit tests for the 2048 hint AI.

Tests the static heuristic, expectimax recursion, and best-move selection.
"""
import pytest

from puzzle_arcade.game2048 import Direction, calculate_best_move, create_empty_grid, evaluate_grid
from puzzle_arcade.game2048 import ai


# ============================================================================
# Heuristic Tests
# ============================================================================

class TestEvaluateGrid:
    """Test static board evaluation."""

    def test_empty_grid(self) -> None:
        """16 empty cells plus 24 monotonic pairs."""
        assert evaluate_grid(create_empty_grid()) == 1840

    def test_tile_in_origin_corner(self) -> None:
        grid = create_empty_grid()
        grid[0][0] = 2
        assert evaluate_grid(grid) == 3740

    def test_tile_in_other_corner(self) -> None:
        """Opposite corner gets the smaller bonus and breaks two pairs."""
        grid = create_empty_grid()
        grid[3][3] = 2
        assert evaluate_grid(grid) == 2720

    def test_horizontal_merge_pair(self) -> None:
        grid = create_empty_grid()
        grid[0][0] = 2
        grid[0][1] = 2
        assert evaluate_grid(grid) == 3644

    def test_max_tile_in_corner(self, left_only_grid) -> None:
        assert ai.max_tile_in_corner(left_only_grid) is True
        assert ai.max_tile_in_corner(create_empty_grid()) is False


# ============================================================================
# Expectimax Tests
# ============================================================================

class TestExpectimax:
    """Test the recursive search."""

    def test_depth_zero_is_heuristic(self, left_only_grid) -> None:
        assert ai.expectimax(left_only_grid, 0, chance=True) == evaluate_grid(left_only_grid)

    def test_full_board_chance_node(self, deadlocked_grid) -> None:
        assert ai.expectimax(deadlocked_grid, 2, chance=True) == evaluate_grid(deadlocked_grid)

    def test_stuck_max_node(self, deadlocked_grid) -> None:
        assert ai.expectimax(deadlocked_grid, 2, chance=False) == evaluate_grid(deadlocked_grid)

    def test_chance_node_weights_spawns(self) -> None:
        """One empty cell: 0.9 * value with a 2 plus 0.1 * value with a 4."""
        grid = [
            [None, 4, 2, 4],
            [4, 2, 4, 2],
            [2, 4, 2, 4],
            [4, 2, 4, 2],
        ]
        with_two = [list(row) for row in grid]
        with_two[0][0] = 2
        with_four = [list(row) for row in grid]
        with_four[0][0] = 4
        expected = 0.9 * evaluate_grid(with_two) + 0.1 * evaluate_grid(with_four)
        assert ai.expectimax(grid, 1, chance=True) == pytest.approx(expected)


# ============================================================================
# Best Move Tests
# ============================================================================

class TestCalculateBestMove:
    """Test move selection and explanations."""

    def test_no_legal_move(self, deadlocked_grid) -> None:
        assert calculate_best_move(deadlocked_grid) is None

    def test_only_legal_move(self, left_only_grid) -> None:
        hint = calculate_best_move(left_only_grid)
        assert hint.direction == Direction.LEFT
        assert hint.reason == "Best available position"

    def test_ties_prefer_up_first(self, monkeypatch) -> None:
        monkeypatch.setattr(ai, "expectimax", lambda grid, depth, chance: 0.0)
        grid = create_empty_grid()
        grid[1][1] = 2
        assert calculate_best_move(grid).direction == Direction.UP

    def test_ties_skip_unmoving_directions(self, monkeypatch) -> None:
        monkeypatch.setattr(ai, "expectimax", lambda grid, depth, chance: 0.0)
        grid = create_empty_grid()
        grid[0][0] = 2
        assert calculate_best_move(grid).direction == Direction.DOWN

    def test_highest_value_wins_and_is_explained(self, monkeypatch) -> None:
        monkeypatch.setattr(
            ai, "expectimax", lambda grid, depth, chance: 1.0 if grid[0][0] == 4 else 0.0
        )
        grid = create_empty_grid()
        grid[0][0] = 2
        grid[0][1] = 2
        hint = calculate_best_move(grid)
        assert hint.direction == Direction.LEFT
        assert hint.score == 1.0
        assert hint.reason == "Merges 2, opens 1 cell, keeps max tile in corner"

    def test_search_starts_with_chance_node(self, monkeypatch) -> None:
        calls = []

        def record(grid, depth, chance):
            calls.append((depth, chance))
            return 0.0

        monkeypatch.setattr(ai, "expectimax", record)
        grid = create_empty_grid()
        grid[1][1] = 2
        calculate_best_move(grid, depth=3)
        assert calls == [(3, True)] * 4

    def test_real_search_returns_legal_move(self) -> None:
        grid = [
            [2, 4, 8, None],
            [None, 2, None, None],
            [None, None, 4, None],
            [None, None, None, 2],
        ]
        hint = calculate_best_move(grid)
        assert hint is not None
        assert hint.direction in Direction
        assert hint.score > 0
