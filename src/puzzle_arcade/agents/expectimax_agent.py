"""
Expectimax agent for 2048.

Plays the move suggested by the hint AI.
"""
from typing import Optional

import numpy as np

from ..game2048.ai import SEARCH_DEPTH, calculate_best_move
from ..game2048.environment import observation_to_grid
from .base_agent import BaseAgent


class ExpectimaxAgent(BaseAgent):
    """Agent that follows calculate_best_move at a fixed search depth."""

    def __init__(self, depth: int = SEARCH_DEPTH) -> None:
        self.depth = depth

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        hint = calculate_best_move(observation_to_grid(observation), self.depth)
        if hint is None:
            return 0
        return self.direction_to_action(hint.direction)
