"""
Base agent interface for 2048 AI.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from ..game2048.grid import DIRECTIONS, Direction


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for 2048 agents.

    All agents must implement the select_action method to choose a move
    direction based on the current observation.
    """

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 4x4 array of tile values (0 = empty).
            valid_actions: Optional mask of directions that change the grid.

        Returns:
            Action index into DIRECTIONS.
        """

    def action_to_direction(self, action: int) -> Direction:
        """Convert an action index to its direction."""
        return DIRECTIONS[action]

    def direction_to_action(self, direction: Direction) -> int:
        """Convert a direction to its action index."""
        return DIRECTIONS.index(Direction(direction))

    def reset(self) -> None:
        """Reset agent state for new episode."""
