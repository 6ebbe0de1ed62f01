"""
Game module for Wordle.

Tracks guesses, the keyboard letter states and the win/lose outcome for
one target word.
"""
import logging
from datetime import date
from enum import Enum, auto
from typing import Dict, List, Optional, Sequence

from ..rng import RandomSource
from .engine import (
    WORD_LENGTH,
    GuessResult,
    LetterState,
    check_guess,
    get_daily_word,
    get_random_word,
    is_solved,
    is_valid_word,
    update_key_states,
)
from .words import ENGLISH_WORDS


logger = logging.getLogger(__name__)

MAX_GUESSES = 6


class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class InvalidGuessError(ValueError):
    """Raised when a guess is rejected before scoring."""


class WordleGame:
    """
    A Wordle game in progress.

    Rejected guesses raise InvalidGuessError and do not use up a turn.
    """

    def __init__(
        self,
        answer: Optional[str] = None,
        words: Sequence[str] = ENGLISH_WORDS,
        skip_validation: bool = False,
        rng: RandomSource = None,
    ) -> None:
        """
        Start a game.

        Args:
            answer: Target word; random from the dictionary when omitted.
            words: Dictionary used for validation and random picks.
            skip_validation: Accept guesses missing from the dictionary.
            rng: Random source for the target pick.
        """
        self.words = words
        self.skip_validation = skip_validation
        self.answer = (answer or get_random_word(words, rng)).upper()
        self.guesses: List[GuessResult] = []
        self.key_states: Dict[str, LetterState] = {}
        self.status = GameStatus.PLAYING

    @classmethod
    def daily(cls, today: Optional[date] = None, words: Sequence[str] = ENGLISH_WORDS) -> "WordleGame":
        """Game on the word of the day."""
        return cls(answer=get_daily_word(today, words), words=words)

    @property
    def remaining_guesses(self) -> int:
        return MAX_GUESSES - len(self.guesses)

    def submit_guess(self, guess: str) -> GuessResult:
        """
        Score a guess and update the game.

        Args:
            guess: Five-letter word.

        Returns:
            Per-letter feedback.

        Raises:
            InvalidGuessError: If the game is over, the guess is too short
                or long, or it is not in the dictionary.
        """
        if self.status != GameStatus.PLAYING:
            raise InvalidGuessError("Game is over")
        if len(guess) < WORD_LENGTH:
            raise InvalidGuessError("Not enough letters")
        if len(guess) > WORD_LENGTH or not guess.isalpha():
            raise InvalidGuessError(f"Guess must be {WORD_LENGTH} letters")
        if not self.skip_validation and not is_valid_word(guess, self.words):
            raise InvalidGuessError("Not in word list")

        result = check_guess(guess, self.answer)
        self.guesses.append(result)
        self.key_states = update_key_states(self.key_states, result)

        if is_solved(result):
            self.status = GameStatus.WON
        elif len(self.guesses) >= MAX_GUESSES:
            self.status = GameStatus.LOST
        logger.debug("Guess %d/%d: %s", len(self.guesses), MAX_GUESSES, guess.upper())
        return result
