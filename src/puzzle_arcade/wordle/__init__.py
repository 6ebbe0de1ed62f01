"""
Wordle module.

Provides guess scoring, dictionary validation, random and daily word
selection, and a stateful six-guess game.
"""
from .words import ENGLISH_WORDS, WORD_LISTS
from .engine import (
    WORD_LENGTH,
    GuessResult,
    LetterResult,
    LetterState,
    check_guess,
    daily_index,
    get_daily_word,
    get_random_word,
    get_word_list,
    is_valid_word,
    update_key_states,
)
from .game import GameStatus, InvalidGuessError, MAX_GUESSES, WordleGame

__all__ = [
    "ENGLISH_WORDS",
    "WORD_LISTS",
    "WORD_LENGTH",
    "GuessResult",
    "LetterResult",
    "LetterState",
    "check_guess",
    "daily_index",
    "get_daily_word",
    "get_random_word",
    "get_word_list",
    "is_valid_word",
    "update_key_states",
    "GameStatus",
    "InvalidGuessError",
    "MAX_GUESSES",
    "WordleGame",
]
