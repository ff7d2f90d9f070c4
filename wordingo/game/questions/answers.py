from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from wordingo.game.modes.catalog import ANAGRAM_GAME_TYPE

T = TypeVar("T")


def normalize_answer(value: str) -> str:
    return value.strip().lower()


def letters_match(first: str, second: str) -> bool:
    """True when both strings use the same letters, ignoring case and whitespace."""

    def _letters(value: str) -> list[str]:
        return sorted("".join(normalize_answer(value).split()))

    return _letters(first) == _letters(second)


def validate_answer(
    game_type: str,
    user_answer: str,
    correct_answer: str,
    options: Sequence[str] | None = None,
) -> bool:
    # Anagrams must still spell the canonical answer; a different word built
    # from the same letters is rejected.
    del options
    is_exact = normalize_answer(user_answer) == normalize_answer(correct_answer)
    if game_type == ANAGRAM_GAME_TYPE:
        return letters_match(user_answer, correct_answer) and is_exact
    return is_exact


def shuffle_items(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
