"""
Minesweeper module.

Provides the pure grid engine, the stateful game, and a Gymnasium
environment for agents.
"""
from .cell import Cell
from .grid import (
    BoardConfig,
    DIFFICULTIES,
    EASY,
    HARD,
    MEDIUM,
    MineGrid,
    check_lose,
    check_win,
    chord_reveal,
    count_flags,
    create_grid,
    reveal_all_mines,
    reveal_cell,
    toggle_flag,
)
from .game import GameState, MinesweeperGame
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "BoardConfig",
    "DIFFICULTIES",
    "EASY",
    "MEDIUM",
    "HARD",
    "MineGrid",
    "check_lose",
    "check_win",
    "chord_reveal",
    "count_flags",
    "create_grid",
    "reveal_all_mines",
    "reveal_cell",
    "toggle_flag",
    "GameState",
    "MinesweeperGame",
    "MinesweeperEnv",
]
