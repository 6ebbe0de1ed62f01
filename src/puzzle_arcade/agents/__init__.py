"""
2048 AI agents module.

Provides agents for playing 2048:
- RandomAgent: Baseline random selection
- ExpectimaxAgent: Depth-limited expectimax search over tile spawns
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .expectimax_agent import ExpectimaxAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "ExpectimaxAgent",
]
