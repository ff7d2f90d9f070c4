from __future__ import annotations

import random
from collections import Counter

from wordingo.game.questions.answers import (
    letters_match,
    normalize_answer,
    shuffle_items,
    validate_answer,
)


def test_normalize_answer_trims_and_lowercases() -> None:
    assert normalize_answer("  Silent ") == "silent"


def test_validate_answer_ignores_case_and_surrounding_whitespace() -> None:
    assert validate_answer("spelling", "  NECESSARY ", "necessary") is True
    assert validate_answer("association", "Cold", "cold", ["cold", "warm"]) is True
    assert validate_answer("synonym", "glad", "happy") is False


def test_anagram_accepts_canonical_answer_with_noise() -> None:
    assert validate_answer("anagram", "  Silent ", "silent") is True


def test_anagram_rejects_other_word_from_same_letters() -> None:
    assert letters_match("Tinsel", "Silent") is True
    assert validate_answer("anagram", "Tinsel", "Silent") is False


def test_letters_match_ignores_inner_whitespace() -> None:
    assert letters_match("dormitory", "Dirty Room") is True
    assert letters_match("listen", "lister") is False


def test_shuffle_items_returns_permutation_without_mutating() -> None:
    items = ["a", "b", "c", "d", "e"]

    shuffled = shuffle_items(items, random.Random(11))

    assert sorted(shuffled) == items
    assert items == ["a", "b", "c", "d", "e"]
    assert shuffled is not items


def test_shuffle_items_handles_tiny_inputs() -> None:
    assert shuffle_items([]) == []
    assert shuffle_items(["only"]) == ["only"]


def test_shuffle_items_is_reproducible_with_seed() -> None:
    items = list(range(10))

    assert shuffle_items(items, random.Random(5)) == shuffle_items(items, random.Random(5))


def test_shuffle_items_spreads_first_position_evenly() -> None:
    rng = random.Random(2026)
    trials = 6000
    first_positions = Counter(shuffle_items(["a", "b", "c"], rng)[0] for _ in range(trials))

    for item in ("a", "b", "c"):
        assert abs(first_positions[item] - trials / 3) < trials * 0.05
