from __future__ import annotations

import random

import pytest

from wordingo.game.questions.wordle import (
    WORD_LENGTH,
    WORDLE_WORDS,
    LetterState,
    evaluate_guess,
    pick_word,
    scramble_word,
)

C = LetterState.CORRECT
P = LetterState.PRESENT
A = LetterState.ABSENT


def test_word_list_holds_distinct_five_letter_words() -> None:
    assert len(set(WORDLE_WORDS)) == len(WORDLE_WORDS)
    assert all(len(word) == WORD_LENGTH and word.isalpha() for word in WORDLE_WORDS)


def test_pick_word_draws_from_list() -> None:
    assert pick_word(random.Random(1)) in WORDLE_WORDS


def test_evaluate_guess_exact_match() -> None:
    assert evaluate_guess("CRANE", "crane") == [C, C, C, C, C]


def test_evaluate_guess_mixed_feedback() -> None:
    assert evaluate_guess("react", "crane") == [P, P, C, P, A]


def test_evaluate_guess_counts_repeated_letters_once() -> None:
    # "chess" has one spare "s" after the exact match at the end.
    assert evaluate_guess("sassy", "chess") == [P, A, A, C, A]


def test_evaluate_guess_prefers_exact_match_over_present() -> None:
    assert evaluate_guess("lolly", "hello") == [A, P, C, C, A]


def test_evaluate_guess_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        evaluate_guess("cat", "crane")


def test_scramble_word_changes_order_but_keeps_letters() -> None:
    rng = random.Random(9)

    for word in ("crane", "apple", "jazzy"):
        clue = scramble_word(word, rng)
        assert clue != word.upper()
        assert sorted(clue) == sorted(word.upper())


def test_scramble_word_with_one_distinct_letter_is_returned_upper_cased() -> None:
    assert scramble_word("aaaaa", random.Random(0)) == "AAAAA"
