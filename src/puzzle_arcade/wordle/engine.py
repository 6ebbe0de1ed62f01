"""
Engine module for Wordle.

Guess scoring, dictionary checks, and random or daily target selection.
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Sequence

from ..rng import RandomSource, resolve_rng
from .words import ENGLISH_WORDS, WORD_LISTS


# ============================================================================
# Constants
# ============================================================================

WORD_LENGTH = 5


class LetterState(str, Enum):
    """Feedback for one letter of a guess."""

    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


@dataclass(frozen=True)
class LetterResult:
    """A guessed letter and its feedback."""

    letter: str
    state: LetterState


GuessResult = List[LetterResult]


def get_word_list(language: str = "en") -> Sequence[str]:
    """
    Dictionary for a language.

    Raises:
        ValueError: If no word list is registered for the language.
    """
    try:
        return WORD_LISTS[language]
    except KeyError:
        available = ", ".join(sorted(WORD_LISTS))
        raise ValueError(
            f"No word list for language {language!r} (available: {available})"
        ) from None


# ============================================================================
# Guess Scoring
# ============================================================================

def check_guess(guess: str, answer: str) -> GuessResult:
    """
    Score a guess against the answer.

    Exact matches are marked first and consume their answer letter. Each
    remaining guess letter then takes the leftmost unused matching answer
    letter as present, or is absent. A letter is therefore never marked
    more often than it occurs in the answer.

    Args:
        guess: Guessed word (any case).
        answer: Target word (any case).

    Returns:
        One LetterResult per position.

    Raises:
        ValueError: If either word is not five letters long.
    """
    guess_chars = guess.upper()
    answer_chars = answer.upper()
    if len(guess_chars) != WORD_LENGTH or len(answer_chars) != WORD_LENGTH:
        raise ValueError(f"Guess and answer must both have {WORD_LENGTH} letters")

    states: List[Optional[LetterState]] = [None] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    for i in range(WORD_LENGTH):
        if guess_chars[i] == answer_chars[i]:
            states[i] = LetterState.CORRECT
            used[i] = True

    for i in range(WORD_LENGTH):
        if states[i] is not None:
            continue
        states[i] = LetterState.ABSENT
        for j in range(WORD_LENGTH):
            if not used[j] and guess_chars[i] == answer_chars[j]:
                states[i] = LetterState.PRESENT
                used[j] = True
                break

    return [LetterResult(letter, state) for letter, state in zip(guess_chars, states)]


def is_solved(result: GuessResult) -> bool:
    return all(item.state == LetterState.CORRECT for item in result)


def update_key_states(
    key_states: Dict[str, LetterState], result: GuessResult
) -> Dict[str, LetterState]:
    """
    Merge a guess result into the keyboard letter states.

    Correct always wins, present replaces anything but correct, and absent
    only marks letters with no state yet.

    Returns:
        New mapping; the input is not modified.
    """
    merged = dict(key_states)
    for item in result:
        current = merged.get(item.letter)
        if item.state == LetterState.CORRECT:
            merged[item.letter] = LetterState.CORRECT
        elif item.state == LetterState.PRESENT and current != LetterState.CORRECT:
            merged[item.letter] = LetterState.PRESENT
        elif current is None:
            merged[item.letter] = LetterState.ABSENT
    return merged


# ============================================================================
# Dictionary and Target Selection
# ============================================================================

def is_valid_word(word: str, words: Sequence[str] = ENGLISH_WORDS) -> bool:
    """Case-insensitive dictionary membership."""
    return word.lower() in words


def get_random_word(words: Sequence[str] = ENGLISH_WORDS, rng: RandomSource = None) -> str:
    """Uniformly chosen word, uppercased."""
    generator = resolve_rng(rng)
    return words[int(generator.integers(len(words)))].upper()


def daily_index(today: date, size: int) -> int:
    """Index of the day's word: YYYYMMDD as a number, modulo the list size."""
    seed = today.year * 10000 + today.month * 100 + today.day
    return seed % size


def get_daily_word(today: Optional[date] = None, words: Sequence[str] = ENGLISH_WORDS) -> str:
    """
    Word of the day, the same for every player on a given local date.

    Args:
        today: Date to use (defaults to the local current date).
        words: Dictionary to pick from.

    Returns:
        Uppercased word.
    """
    if today is None:
        today = date.today()
    return words[daily_index(today, len(words))].upper()
