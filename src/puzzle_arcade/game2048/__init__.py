"""
2048 module.

Provides the sliding/merging engine, the expectimax hint AI, the stateful
game, and a Gymnasium environment for agents.
"""
from .grid import (
    DIRECTIONS,
    Direction,
    Grid2048,
    MoveResult,
    WINNING_TILE,
    add_random_tile,
    can_move,
    create_empty_grid,
    format_grid,
    has_won,
    init_game,
    max_tile,
    move,
    slide_row,
)
from .ai import Hint, calculate_best_move, evaluate_grid, expectimax
from .game import Game2048
from .environment import Game2048Env, grid_to_observation, observation_to_grid

__all__ = [
    "DIRECTIONS",
    "Direction",
    "Grid2048",
    "MoveResult",
    "WINNING_TILE",
    "add_random_tile",
    "can_move",
    "create_empty_grid",
    "format_grid",
    "has_won",
    "init_game",
    "max_tile",
    "move",
    "slide_row",
    "Hint",
    "calculate_best_move",
    "evaluate_grid",
    "expectimax",
    "Game2048",
    "Game2048Env",
    "grid_to_observation",
    "observation_to_grid",
]
