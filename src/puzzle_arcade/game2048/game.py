"""
Game module for 2048.

Tracks the board, score and best score across moves, and the
won / keep-playing / game-over lifecycle.
"""
from typing import Any, Dict, Optional

from ..rng import RandomSource, resolve_rng
from .ai import Hint, calculate_best_move
from .grid import (
    Direction,
    Grid2048,
    add_random_tile,
    can_move,
    clone_grid,
    has_won,
    init_game,
    max_tile,
    move,
    validate_grid,
)


class Game2048:
    """
    A 2048 game in progress.

    Reaching 2048 pauses the game until continue_playing() is called;
    afterwards the game only ends when no move is possible.
    """

    def __init__(self, rng: RandomSource = None, best_score: int = 0) -> None:
        """
        Start a new game.

        Args:
            rng: Random source for tile spawns.
            best_score: Best score carried over from earlier games.
        """
        self._rng = resolve_rng(rng)
        self.best_score = best_score
        self.new_game()

    def new_game(self) -> None:
        """Reset the board and score, keeping the best score."""
        self.grid: Grid2048 = init_game(self._rng)
        self.score = 0
        self.won = False
        self.keep_playing = False
        self.over = False

    @property
    def is_active(self) -> bool:
        """Whether moves are currently accepted."""
        return not self.over and (not self.won or self.keep_playing)

    def move(self, direction: Direction) -> bool:
        """
        Play a move and spawn a tile if the grid changed.

        Returns:
            True if the move changed the grid.
        """
        if not self.is_active:
            return False

        result = move(self.grid, direction)
        if not result.moved:
            return False

        self.grid = add_random_tile(result.grid, self._rng)
        self.score += result.score
        self.best_score = max(self.best_score, self.score)

        if not self.keep_playing and has_won(self.grid):
            self.won = True
        elif not can_move(self.grid):
            self.over = True
        return True

    def continue_playing(self) -> None:
        """Keep going after reaching 2048."""
        if self.won:
            self.keep_playing = True
            self.over = not can_move(self.grid)

    def hint(self) -> Optional[Hint]:
        """Best move suggested by the expectimax search."""
        return calculate_best_move(self.grid)

    @property
    def max_tile(self) -> int:
        return max_tile(self.grid)

    # ========================================================================
    # Persistence
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": clone_grid(self.grid),
            "score": self.score,
            "bestScore": self.best_score,
            "won": self.won,
            "keepPlaying": self.keep_playing,
            "over": self.over,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], rng: RandomSource = None) -> "Game2048":
        """
        Restore a game saved with to_dict.

        Raises:
            ValueError: If the grid is missing or malformed.
        """
        grid = data.get("grid")
        if not isinstance(grid, list):
            raise ValueError("Invalid save data")
        validate_grid(grid)
        game = cls(rng=rng, best_score=int(data.get("bestScore", 0)))
        game.grid = clone_grid(grid)
        game.score = int(data.get("score", 0))
        game.won = bool(data.get("won", False))
        game.keep_playing = bool(data.get("keepPlaying", False))
        game.over = bool(data.get("over", not can_move(grid)))
        return game
