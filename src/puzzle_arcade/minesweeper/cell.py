"""
Cell module for Minesweeper.

Represents individual cells of the mine field: whether they hold a mine,
their adjacent mine count, and their revealed/flagged state.
"""
from dataclasses import dataclass, replace


# ============================================================================
# Constants
# ============================================================================

HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine (fixed at generation).
        is_revealed: Whether the cell has been uncovered (never reset).
        is_flagged: Whether the player marked the cell as a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0

    def copy(self) -> "Cell":
        """Return an independent copy of this cell."""
        return replace(self)

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.is_revealed:
            return MINE_OBSERVATION if self.is_mine else self.adjacent_mines
        if self.is_flagged:
            return FLAGGED_OBSERVATION
        return HIDDEN_OBSERVATION
