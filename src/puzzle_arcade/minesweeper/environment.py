"""
Gymnasium wrapper around MinesweeperGame.

One discrete action per cell; an action reveals that cell. Observations
are the int8 boards produced by MinesweeperGame.get_observation.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import FLAGGED_OBSERVATION, HIDDEN_OBSERVATION, MINE_OBSERVATION
from .game import GameState, MinesweeperGame
from .grid import BoardConfig


SAFE_REVEAL_REWARD = 1.0
WIN_REWARD = 10.0
MINE_PENALTY = -10.0
WASTED_ACTION_PENALTY = -0.1

RENDER_SYMBOLS: Dict[int, str] = {
    HIDDEN_OBSERVATION: ".",
    FLAGGED_OBSERVATION: "F",
    MINE_OBSERVATION: "*",
    0: " ",
}


class MinesweeperEnv(gym.Env):
    """Reveal-only Minesweeper episodes seeded through Gymnasium's np_random."""

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.game = MinesweeperGame(self.config, rng=self.np_random)

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)
        self.safe_cells = self.config.total_cells - self.config.num_mines
        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        # Mines are placed on the first step, so the board is rebuilt from
        # the freshly seeded generator.
        super().reset(seed=seed)
        self.game = MinesweeperGame(self.config, rng=self.np_random)
        self._steps = 0
        return self.game.get_observation(), self._info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """Reveal the cell at index row * cols + col."""
        self._steps += 1
        reward = self._reveal(*divmod(int(action), self.config.cols))
        return (
            self.game.get_observation(),
            reward,
            self.game.is_over,
            False,
            self._info(),
        )

    def _reveal(self, row: int, col: int) -> float:
        if not self.game.reveal(row, col):
            return WASTED_ACTION_PENALTY
        if self.game.state == GameState.WON:
            return WIN_REWARD
        if self.game.state == GameState.LOST:
            return MINE_PENALTY
        return SAFE_REVEAL_REWARD

    def _info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "revealed": self.game.count_revealed(),
            "total_safe": self.safe_cells,
            "game_state": self.game.state.name,
            "valid_actions": len(self.game.get_valid_actions()),
        }

    def get_action_mask(self) -> np.ndarray:
        """Boolean mask over actions; True where the cell can still be revealed."""
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.game.get_valid_actions():
            mask[row * self.config.cols + col] = True
        return mask

    def render(self) -> Optional[str]:
        text = "\n".join(
            " ".join(RENDER_SYMBOLS.get(int(value), str(value)) for value in row)
            for row in self.game.get_observation()
        )
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None
