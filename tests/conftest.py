"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from puzzle_arcade.minesweeper import BoardConfig, Cell, MinesweeperGame
from puzzle_arcade.minesweeper.grid import neighbors


# ============================================================================
# Sudoku Fixtures
# ============================================================================

@pytest.fixture
def classic_puzzle():
    """A well-known 9x9 puzzle with a unique solution."""
    rows = [
        "53..7....",
        "6..195...",
        ".98....6.",
        "8...6...3",
        "4..8.3..1",
        "7...2...6",
        ".6....28.",
        "...419..5",
        "....8..79",
    ]
    return [[None if ch == "." else int(ch) for ch in row] for row in rows]


@pytest.fixture
def classic_solution():
    """Solution of classic_puzzle."""
    rows = [
        "534678912",
        "672195348",
        "198342567",
        "859761423",
        "426853791",
        "713924856",
        "961537284",
        "287419635",
        "345286179",
    ]
    return [[int(ch) for ch in row] for row in rows]


@pytest.fixture
def solved_6x6():
    """A valid solved 6x6 grid with 2x3 blocks."""
    return [
        [1, 2, 3, 4, 5, 6],
        [4, 5, 6, 1, 2, 3],
        [2, 3, 1, 5, 6, 4],
        [5, 6, 4, 2, 3, 1],
        [3, 1, 2, 6, 4, 5],
        [6, 4, 5, 3, 1, 2],
    ]


# ============================================================================
# Minesweeper Fixtures
# ============================================================================

@pytest.fixture
def make_mine_grid():
    """
    Build a grid from a text layout where "*" marks a mine.

    Adjacent counts are computed the same way create_grid does.
    """
    def build(layout):
        rows, cols = len(layout), len(layout[0])
        grid = [[Cell(is_mine=ch == "*") for ch in line] for line in layout]
        for row in range(rows):
            for col in range(cols):
                if not grid[row][col].is_mine:
                    grid[row][col].adjacent_mines = sum(
                        1 for r, c in neighbors(row, col, rows, cols) if grid[r][c].is_mine
                    )
        return grid

    return build


@pytest.fixture
def corner_mine_grid(make_mine_grid):
    """3x3 grid with a single mine in the top-left corner."""
    return make_mine_grid([
        "*..",
        "...",
        "...",
    ])


@pytest.fixture
def default_game() -> MinesweeperGame:
    """Create a default 9x9 game with 10 mines."""
    return MinesweeperGame(rng=42)


@pytest.fixture
def empty_game() -> MinesweeperGame:
    """Create a game with no mines for cascade testing."""
    return MinesweeperGame(BoardConfig(5, 5, 0), rng=0)


# ============================================================================
# 2048 Fixtures
# ============================================================================

@pytest.fixture
def deadlocked_grid():
    """Full 2048 board with no equal neighbors."""
    return [
        [2, 4, 2, 4],
        [4, 2, 4, 2],
        [2, 4, 2, 4],
        [4, 2, 4, 2],
    ]


@pytest.fixture
def left_only_grid():
    """Board where only a left move changes anything."""
    return [
        [None, 2, 4, 8],
        [None, 4, 8, 16],
        [None, 8, 16, 32],
        [None, 16, 32, 64],
    ]
