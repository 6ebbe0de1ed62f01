"""
Game module for Minesweeper.

Stateful wrapper around the pure grid functions: lazy mine placement on
the first click, game state tracking, and the remaining-mine counter.
"""
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from ..rng import RandomSource, resolve_rng
from .cell import Cell
from .grid import (
    BoardConfig,
    MineGrid,
    can_chord,
    check_lose,
    check_win,
    chord_reveal,
    count_flags,
    create_grid,
    reveal_all_mines,
    reveal_cell,
    toggle_flag,
)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    WAITING = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

class MinesweeperGame:
    """
    Minesweeper game in progress.

    The mine field does not exist until the first reveal, which places
    mines away from the clicked cell and its neighbors.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: RandomSource = None,
    ) -> None:
        """
        Initialize the game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random source for mine placement.
        """
        self.config = config or BoardConfig()
        self._rng = resolve_rng(rng)
        self.grid: Optional[MineGrid] = None
        self.state = GameState.WAITING

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def _is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    @property
    def is_over(self) -> bool:
        return self.state in (GameState.WON, GameState.LOST)

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell, creating the mine field on the first call.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the grid changed, False otherwise.
        """
        if self.is_over or not self._is_valid_position(row, col):
            return False

        if self.grid is None:
            self.grid = create_grid(
                self.config.rows,
                self.config.cols,
                self.config.num_mines,
                first_click=(row, col),
                rng=self._rng,
            )
            self.state = GameState.PLAYING

        cell = self.grid[row][col]
        if cell.is_flagged or cell.is_revealed:
            return False

        self._apply(reveal_cell(self.grid, row, col))
        return True

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self.state != GameState.PLAYING or not self._is_valid_position(row, col):
            return False
        if self.grid[row][col].is_revealed:
            return False
        self.grid = toggle_flag(self.grid, row, col)
        return True

    def chord(self, row: int, col: int) -> bool:
        """
        Chord action: reveal all unflagged neighbors if flag count matches.

        Returns:
            True if chord was performed, False otherwise.
        """
        if self.state != GameState.PLAYING or not self._is_valid_position(row, col):
            return False
        if not can_chord(self.grid, row, col):
            return False
        self._apply(chord_reveal(self.grid, row, col))
        return True

    def _apply(self, new_grid: MineGrid) -> None:
        """Store a new grid and update the game state."""
        if check_lose(new_grid):
            self.grid = reveal_all_mines(new_grid)
            self.state = GameState.LOST
        elif check_win(new_grid):
            self.grid = new_grid
            self.state = GameState.WON
        else:
            self.grid = new_grid

    def reset(self) -> None:
        """Reset to a fresh game awaiting the first click."""
        self.grid = None
        self.state = GameState.WAITING

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def flags_placed(self) -> int:
        return count_flags(self.grid) if self.grid is not None else 0

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self.config.num_mines - self.flags_placed

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid or not yet created."""
        if self.grid is None or not self._is_valid_position(row, col):
            return None
        return self.grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D array where -1 = hidden, -2 = flagged, 0-8 = revealed count,
            9 = revealed mine. Before the first click every cell is hidden.
        """
        obs = np.full((self.config.rows, self.config.cols), -1, dtype=np.int8)
        if self.grid is None:
            return obs
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self.grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of valid cells to reveal.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        if self.is_over:
            return []
        return [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if self.grid is None or self.grid[row][col].is_hidden
        ]

    def count_revealed(self) -> int:
        if self.grid is None:
            return 0
        return sum(1 for row in self.grid for cell in row if cell.is_revealed and not cell.is_mine)
