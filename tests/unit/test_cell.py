"""
Unit tests for the Minesweeper Cell class.

Tests default values, copying, and observation conversion.
"""
from puzzle_arcade.minesweeper import Cell


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be neither revealed nor flagged."""
        cell = Cell()
        assert cell.is_revealed is False
        assert cell.is_flagged is False
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0

    def test_flagged_cell_is_not_hidden(self) -> None:
        """A flagged cell does not count as hidden."""
        assert Cell(is_flagged=True).is_hidden is False


# ============================================================================
# Cell Copy Tests
# ============================================================================

class TestCellCopy:
    """Test cell copying."""

    def test_copy_is_equal(self) -> None:
        """Copy should carry every attribute."""
        cell = Cell(is_mine=True, is_revealed=True, adjacent_mines=0)
        assert cell.copy() == cell

    def test_copy_is_independent(self) -> None:
        """Mutating the copy should not affect the original."""
        cell = Cell(adjacent_mines=2)
        clone = cell.copy()
        clone.is_revealed = True
        assert cell.is_revealed is False


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test conversion to observation values."""

    def test_hidden_cell_observation(self) -> None:
        """Hidden cell should return -1."""
        assert Cell(adjacent_mines=3).to_observation() == -1

    def test_flagged_cell_observation(self) -> None:
        """Flagged cell should return -2."""
        assert Cell(is_mine=True, is_flagged=True).to_observation() == -2

    def test_revealed_number_observation(self) -> None:
        """Revealed safe cell should return its count."""
        assert Cell(is_revealed=True, adjacent_mines=5).to_observation() == 5

    def test_revealed_empty_observation(self) -> None:
        """Revealed zero cell should return 0."""
        assert Cell(is_revealed=True).to_observation() == 0

    def test_revealed_mine_observation(self) -> None:
        """Revealed mine should return 9."""
        assert Cell(is_mine=True, is_revealed=True).to_observation() == 9
