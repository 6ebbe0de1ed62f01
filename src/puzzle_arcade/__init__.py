"""
Puzzle Arcade engines.

Pure game logic for Sudoku, Minesweeper, 2048 and Wordle, plus the thin
stateful games, Gymnasium environments and agents built on top of them.
"""

__version__ = "0.1.0"
