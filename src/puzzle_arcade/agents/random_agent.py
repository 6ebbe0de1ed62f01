"""
Random agent for 2048.

Serves as a baseline by selecting random valid moves.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects moves uniformly at random.

    This provides a baseline for comparing the expectimax agent.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            seed: Random seed for reproducibility.
        """
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 4x4 array of tile values.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = np.ones(4, dtype=bool)

        valid_indices = np.where(valid_actions)[0]

        if len(valid_indices) == 0:
            # No valid actions, return any action (will be rejected)
            return 0

        return int(self.rng.choice(valid_indices))
