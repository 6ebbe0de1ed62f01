"""
Session module for Sudoku.

Holds the state of one game in progress: the givens, the player's entries,
pencil notes, and undo/redo history. Every engine call goes through the
pure functions in the solver and generator modules.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple, Union

from ..rng import RandomSource, resolve_rng
from .generator import Difficulty, SUPPORTED_SIZES, generate_sudoku, parse_difficulty
from .grid import (
    Grid,
    Position,
    block_dimensions,
    block_origin,
    clone_grid,
    empty_positions,
    validate_grid,
)
from .solver import find_conflicts, is_valid_move, solve_sudoku


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MAX_HISTORY_SIZE = 100
MAX_SAVE_FILE_SIZE = 100 * 1024

Notes = Dict[Position, List[int]]


@dataclass
class Snapshot:
    """Undo/redo entry: the player's grid and notes at one point in time."""

    puzzle: Grid
    notes: Notes


@dataclass
class CheckResult:
    """
    Outcome of checking the player's entries against the solution.

    Attributes:
        wrong_cells: Filled cells that disagree with the solution.
        empty_cells: Number of cells still empty.
    """

    wrong_cells: Set[Position] = field(default_factory=set)
    empty_cells: int = 0

    @property
    def is_complete(self) -> bool:
        """All cells filled and all entries correct."""
        return not self.wrong_cells and self.empty_cells == 0

    @property
    def message(self) -> str:
        """Short summary for display."""
        if self.wrong_cells:
            count = len(self.wrong_cells)
            return f"{count} incorrect cell{'s' if count > 1 else ''}"
        if self.empty_cells == 0:
            return "Solved!"
        return "All entries correct so far"


def _copy_notes(notes: Notes) -> Notes:
    return {position: list(values) for position, values in notes.items()}


# ============================================================================
# Session Class
# ============================================================================

class SudokuSession:
    """
    A Sudoku game in progress.

    Cells that were filled in the initial puzzle are fixed and cannot be
    edited. Each edit pushes a snapshot so it can be undone.
    """

    def __init__(
        self,
        difficulty: Union[str, Difficulty] = Difficulty.EASY,
        size: int = 9,
        rng: RandomSource = None,
        initial_puzzle: Optional[Grid] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            difficulty: Difficulty used when generating a puzzle.
            size: Grid size used when generating a puzzle.
            rng: Random source for generation and hints.
            initial_puzzle: Use this puzzle instead of generating one.
        """
        self.difficulty = parse_difficulty(difficulty)
        self._rng = resolve_rng(rng)
        if initial_puzzle is None:
            initial_puzzle = generate_sudoku(self.difficulty, size, self._rng)
        self.size = validate_grid(initial_puzzle)
        self.initial_puzzle = clone_grid(initial_puzzle)
        self.puzzle = clone_grid(initial_puzzle)
        self.solution = solve_sudoku(initial_puzzle)
        self.notes: Notes = {}
        self.pencil_mode = False
        self._undo_stack: List[Snapshot] = []
        self._redo_stack: List[Snapshot] = []

    @classmethod
    def from_puzzle(cls, puzzle: Grid, rng: RandomSource = None) -> "SudokuSession":
        """Start a session on an existing puzzle."""
        return cls(size=len(puzzle), rng=rng, initial_puzzle=puzzle)

    # ========================================================================
    # History (Low-level)
    # ========================================================================

    def _snapshot(self) -> Snapshot:
        return Snapshot(clone_grid(self.puzzle), _copy_notes(self.notes))

    def _push_history(self) -> None:
        self._undo_stack.append(self._snapshot())
        if len(self._undo_stack) > MAX_HISTORY_SIZE:
            self._undo_stack.pop(0)
        self._redo_stack.clear()

    def _restore(self, snapshot: Snapshot) -> None:
        self.puzzle = clone_grid(snapshot.puzzle)
        self.notes = _copy_notes(snapshot.notes)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def undo(self) -> bool:
        """Revert the last edit. Returns False if there is nothing to undo."""
        if not self._undo_stack:
            return False
        self._redo_stack.append(self._snapshot())
        self._restore(self._undo_stack.pop())
        return True

    def redo(self) -> bool:
        """Re-apply the last undone edit. Returns False if there is nothing to redo."""
        if not self._redo_stack:
            return False
        self._undo_stack.append(self._snapshot())
        self._restore(self._redo_stack.pop())
        return True

    # ========================================================================
    # Player Actions (Mid-level)
    # ========================================================================

    def is_fixed(self, row: int, col: int) -> bool:
        """Check if a cell was given in the initial puzzle."""
        return self.initial_puzzle[row][col] is not None

    def set_value(self, row: int, col: int, value: Optional[int]) -> bool:
        """
        Enter or clear a value.

        An entry that clashes with another value in its row, column or
        block is rejected. An accepted entry removes that digit from the
        notes of every peer cell.

        Args:
            row: Row index.
            col: Column index.
            value: Value in 1..size, or None to clear the cell.

        Returns:
            True if the grid changed, False for fixed cells, out-of-range
            or conflicting values, or entries equal to the current value.
        """
        if self.is_fixed(row, col):
            return False
        if value is not None and not 1 <= value <= self.size:
            return False
        if self.puzzle[row][col] == value and (row, col) not in self.notes:
            return False
        if value is not None:
            trial = clone_grid(self.puzzle)
            trial[row][col] = None
            if not is_valid_move(trial, row, col, value):
                return False
        self._push_history()
        self.puzzle[row][col] = value
        self.notes.pop((row, col), None)
        if value is not None:
            self._prune_peer_notes(row, col, value)
        return True

    def _prune_peer_notes(self, row: int, col: int, value: int) -> None:
        """Drop value from the notes of cells sharing a row, column or block."""
        block_rows, block_cols = block_dimensions(self.size)
        top, left = block_origin(row, col, block_rows, block_cols)
        for position in list(self.notes):
            r, c = position
            in_block = top <= r < top + block_rows and left <= c < left + block_cols
            if r != row and c != col and not in_block:
                continue
            remaining = [note for note in self.notes[position] if note != value]
            if remaining:
                self.notes[position] = remaining
            else:
                del self.notes[position]

    def clear_cell(self, row: int, col: int) -> bool:
        return self.set_value(row, col, None)

    def toggle_note(self, row: int, col: int, value: int) -> bool:
        """
        Add or remove a pencil note on an empty, editable cell.

        Returns:
            True if the notes changed.
        """
        if self.is_fixed(row, col) or self.puzzle[row][col] is not None:
            return False
        if not 1 <= value <= self.size:
            return False
        self._push_history()
        current = set(self.notes.get((row, col), []))
        current ^= {value}
        if current:
            self.notes[(row, col)] = sorted(current)
        else:
            self.notes.pop((row, col), None)
        return True

    def give_hint(self) -> Optional[Position]:
        """
        Fill one random empty cell from the solution.

        Returns:
            The filled position, or None if there is no solution or no
            empty cell.
        """
        if self.solution is None:
            return None
        empties = empty_positions(self.puzzle)
        if not empties:
            return None
        row, col = empties[int(self._rng.integers(len(empties)))]
        self._push_history()
        self.puzzle[row][col] = self.solution[row][col]
        self.notes.pop((row, col), None)
        logger.debug("Hint filled (%d, %d)", row, col)
        return row, col

    def check(self) -> Optional[CheckResult]:
        """Compare entries with the solution, or return None if unsolvable."""
        if self.solution is None:
            return None
        result = CheckResult()
        for row in range(self.size):
            for col in range(self.size):
                value = self.puzzle[row][col]
                if value is None:
                    result.empty_cells += 1
                elif value != self.solution[row][col]:
                    result.wrong_cells.add((row, col))
        return result

    def reveal_solution(self) -> bool:
        """Replace the grid with the solution. Returns False if unsolvable."""
        if self.solution is None:
            return False
        self.puzzle = clone_grid(self.solution)
        return True

    def reset(self) -> None:
        """Return to the initial puzzle and drop notes and history."""
        self.puzzle = clone_grid(self.initial_puzzle)
        self.notes = {}
        self._undo_stack.clear()
        self._redo_stack.clear()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def invalid_cells(self) -> Set[Position]:
        """Filled cells that clash with another cell in a row, column or block."""
        return find_conflicts(self.puzzle)

    @property
    def is_completed(self) -> bool:
        """Check if the grid equals the solution."""
        return self.solution is not None and self.puzzle == self.solution

    # ========================================================================
    # Persistence
    # ========================================================================

    def to_dict(self) -> Dict:
        """Plain JSON-serializable representation."""
        return {
            "puzzle": clone_grid(self.puzzle),
            "initialPuzzle": clone_grid(self.initial_puzzle),
            "solution": clone_grid(self.solution) if self.solution else None,
            "difficulty": self.difficulty.value,
            "size": self.size,
            "notes": {f"{r}-{c}": list(values) for (r, c), values in self.notes.items()},
            "pencilMode": self.pencil_mode,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Dict, rng: RandomSource = None) -> "SudokuSession":
        """
        Restore a session from its dict form.

        Raises:
            ValueError: If the payload is missing grids, has an unsupported
                size, or holds malformed rows or notes.
        """
        if not isinstance(data, dict):
            raise ValueError("Invalid save data")
        puzzle = data.get("puzzle")
        initial = data.get("initialPuzzle")
        if not isinstance(puzzle, list) or not isinstance(initial, list):
            raise ValueError("Invalid save data")
        size = len(puzzle)
        if size not in SUPPORTED_SIZES:
            raise ValueError("Invalid board size in save")
        for grid in (puzzle, initial):
            if len(grid) != size or any(
                not isinstance(row, list) or len(row) != size for row in grid
            ):
                raise ValueError("Corrupted puzzle data")
        validate_grid(puzzle)
        validate_grid(initial)

        session = cls(
            difficulty=data.get("difficulty", Difficulty.EASY.value),
            size=size,
            rng=rng,
            initial_puzzle=initial,
        )
        session.puzzle = clone_grid(puzzle)
        session.notes = _parse_notes(data.get("notes"), size)
        pencil_mode = data.get("pencilMode")
        if isinstance(pencil_mode, bool):
            session.pencil_mode = pencil_mode
        return session

    @classmethod
    def from_json(cls, raw: str, rng: RandomSource = None) -> "SudokuSession":
        """Restore a session saved with to_json."""
        if len(raw.encode("utf-8")) > MAX_SAVE_FILE_SIZE:
            raise ValueError("Save data too large")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError("Invalid save data") from exc
        session = cls.from_dict(data, rng)
        logger.info("Loaded %dx%d session", session.size, session.size)
        return session


def _parse_notes(raw, size: int) -> Notes:
    """
    Parse "row-col" keyed notes; anything that is not a dict yields no notes.

    Raises:
        ValueError: If a key or value is malformed or outside the grid.
    """
    if not isinstance(raw, dict):
        return {}
    notes: Notes = {}
    for key, values in raw.items():
        try:
            row_text, col_text = key.split("-")
            position: Tuple[int, int] = (int(row_text), int(col_text))
            parsed = sorted(int(value) for value in values or [])
        except (AttributeError, TypeError, ValueError) as exc:
            raise ValueError(f"Corrupted notes entry {key!r}") from exc
        row, col = position
        if not (0 <= row < size and 0 <= col < size):
            raise ValueError(f"Notes position {key!r} outside {size}x{size} grid")
        if any(not 1 <= value <= size for value in parsed):
            raise ValueError(f"Notes for {key!r} hold values outside 1..{size}")
        if parsed:
            notes[position] = parsed
    return notes
