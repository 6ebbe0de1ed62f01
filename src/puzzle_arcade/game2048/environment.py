"""
Gymnasium environment wrapper for 2048.

Provides a standard RL interface over Game2048.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .game import Game2048
from .grid import DIRECTIONS, GRID_SIZE, Grid2048, format_grid, move


# ============================================================================
# Observation Helpers
# ============================================================================

def grid_to_observation(grid: Grid2048) -> np.ndarray:
    """Convert a grid to an int array with 0 for empty cells."""
    return np.array(
        [[value or 0 for value in row] for row in grid], dtype=np.int32
    )


def observation_to_grid(observation: np.ndarray) -> Grid2048:
    """Convert an observation back to a grid with None for empty cells."""
    return [[int(value) or None for value in row] for row in observation]


# ============================================================================
# 2048 Environment
# ============================================================================

class Game2048Env(gym.Env):
    """
    Gymnasium environment for 2048.

    Observation:
        4x4 int array of tile values, 0 for empty cells.

    Actions:
        Discrete(4): 0 = up, 1 = down, 2 = left, 3 = right.

    Rewards:
        - Score gained by merges for a move that changes the grid
        - -1 for a move that changes nothing

    The episode terminates when no move is possible or 2048 is reached.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(self, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.render_mode = render_mode
        self.game = Game2048(rng=self.np_random)

        self.observation_space = spaces.Box(
            low=0, high=2 ** 17, shape=(GRID_SIZE, GRID_SIZE), dtype=np.int32
        )
        self.action_space = spaces.Discrete(len(DIRECTIONS))
        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game = Game2048(rng=self.np_random, best_score=self.game.best_score)
        self._steps = 0
        return grid_to_observation(self.game.grid), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Play one move.

        Args:
            action: Direction index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        previous_score = self.game.score
        if self.game.move(DIRECTIONS[int(action)]):
            reward = float(self.game.score - previous_score)
        else:
            reward = -1.0

        terminated = not self.game.is_active
        observation = grid_to_observation(self.game.grid)
        return observation, reward, terminated, False, self._get_info()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "score": self.game.score,
            "max_tile": self.game.max_tile,
            "won": self.game.won,
        }

    def get_action_mask(self) -> np.ndarray:
        """Boolean mask of directions that change the grid."""
        return np.array(
            [move(self.game.grid, direction).moved for direction in DIRECTIONS],
            dtype=bool,
        )

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = format_grid(self.game.grid)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None
