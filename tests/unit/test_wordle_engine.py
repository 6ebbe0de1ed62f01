"""
Unit tests for Wordle guess scoring and word selection.
"""
from datetime import date

import pytest

from puzzle_arcade.wordle import (
    ENGLISH_WORDS,
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

C = LetterState.CORRECT
P = LetterState.PRESENT
A = LetterState.ABSENT


def states(result):
    return [item.state for item in result]


# ============================================================================
# Scoring Tests
# ============================================================================

class TestCheckGuess:
    """Test per-letter feedback."""

    def test_exact_match(self) -> None:
        assert states(check_guess("STONE", "STONE")) == [C] * 5

    def test_no_common_letters(self) -> None:
        assert states(check_guess("QUICK", "STONE")) == [A] * 5

    @pytest.mark.parametrize(
        "guess, answer, expected",
        [
            ("SPEED", "ERASE", [P, A, P, P, A]),
            ("ALLOY", "LLAMA", [P, C, P, A, A]),
            ("SPEED", "ABIDE", [A, A, P, A, P]),
            ("SPEED", "SHEEP", [C, P, C, C, A]),
            ("PAPER", "APPLE", [P, P, C, P, A]),
        ],
    )
    def test_repeated_letters(self, guess: str, answer: str, expected) -> None:
        """A letter is never marked more times than it occurs in the answer."""
        assert states(check_guess(guess, answer)) == expected

    def test_case_insensitive(self) -> None:
        result = check_guess("stone", "STONE")
        assert states(result) == [C] * 5
        assert [item.letter for item in result] == list("STONE")

    def test_wrong_length_raises(self) -> None:
        with pytest.raises(ValueError):
            check_guess("STONES", "STONE")


# ============================================================================
# Keyboard State Tests
# ============================================================================

class TestUpdateKeyStates:
    """Test keyboard state merging."""

    def test_first_guess(self) -> None:
        keys = update_key_states({}, check_guess("SPEED", "SHEEP"))
        assert keys == {"S": C, "P": P, "E": C, "D": A}

    def test_correct_is_never_downgraded(self) -> None:
        keys = {"E": C}
        merged = update_key_states(keys, [LetterResult("E", P), LetterResult("E", A)])
        assert merged["E"] == C

    def test_present_upgrades_absent(self) -> None:
        merged = update_key_states({"R": A}, [LetterResult("R", P)])
        assert merged["R"] == P

    def test_input_not_modified(self) -> None:
        keys = {"A": A}
        update_key_states(keys, [LetterResult("A", C)])
        assert keys == {"A": A}


# ============================================================================
# Dictionary Tests
# ============================================================================

class TestWordSelection:
    """Test dictionary checks and target picks."""

    def test_word_list_is_five_letters(self) -> None:
        assert len(ENGLISH_WORDS) == 503
        assert all(len(word) == 5 and word.islower() for word in ENGLISH_WORDS)

    def test_is_valid_word_ignores_case(self) -> None:
        assert is_valid_word("Apple") is True
        assert is_valid_word("APPLE") is True
        assert is_valid_word("qzxvw") is False

    def test_unknown_language(self) -> None:
        assert get_word_list("en") is ENGLISH_WORDS
        with pytest.raises(ValueError, match="No word list"):
            get_word_list("xx")

    def test_random_word_is_uppercase_and_listed(self) -> None:
        word = get_random_word(rng=4)
        assert word.isupper()
        assert word.lower() in ENGLISH_WORDS

    def test_random_word_seeded(self) -> None:
        assert get_random_word(rng=12) == get_random_word(rng=12)

    def test_daily_index(self) -> None:
        assert daily_index(date(2024, 1, 1), 503) == 20240101 % 503
        assert daily_index(date(2024, 1, 1), 503) == 387

    def test_daily_word(self) -> None:
        assert get_daily_word(date(2024, 1, 1)) == "STAFF"

    def test_daily_word_changes_by_day(self) -> None:
        assert get_daily_word(date(2024, 1, 1)) != get_daily_word(date(2024, 1, 2))

    def test_daily_word_custom_list(self) -> None:
        assert get_daily_word(date(2024, 1, 1), ("alpha", "bravo")) == "BRAVO"
