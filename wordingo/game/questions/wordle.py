from __future__ import annotations

import random
from collections import Counter
from enum import Enum

WORD_LENGTH = 5

WORDLE_WORDS: tuple[str, ...] = (
    "apple",
    "crane",
    "slate",
    "ocean",
    "zesty",
    "lunar",
    "brick",
    "candy",
    "flame",
    "grind",
    "plant",
    "honey",
    "frost",
    "glass",
    "cloud",
    "vapor",
    "blink",
    "chess",
    "pride",
    "mango",
    "shelf",
    "tiger",
    "jazzy",
    "quake",
    "whirl",
    "knack",
    "grape",
    "nymph",
    "spice",
    "flick",
    "drain",
    "blush",
    "creek",
    "snail",
    "flock",
    "bloom",
    "plush",
    "crisp",
    "roast",
    "jumpy",
    "orbit",
    "elbow",
    "tempo",
    "gleam",
    "stoic",
    "forge",
    "hatch",
    "vivid",
    "swirl",
    "ditch",
    "ledge",
    "knoll",
    "moist",
    "glean",
    "waltz",
    "latch",
)


class LetterState(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


def pick_word(rng: random.Random, words: tuple[str, ...] = WORDLE_WORDS) -> str:
    return rng.choice(words)


def scramble_word(word: str, rng: random.Random) -> str:
    """Shuffles the letters until the result differs from `word`, upper-cased."""
    if len(set(word.lower())) < 2:
        return word.upper()

    letters = list(word)
    scrambled = word
    while scrambled == word:
        rng.shuffle(letters)
        scrambled = "".join(letters)
    return scrambled.upper()


def evaluate_guess(guess: str, target: str) -> list[LetterState]:
    """Per-letter feedback for a guess.

    A repeated letter is only marked PRESENT as many times as it still occurs
    in the target after exact matches are taken out.
    """
    guess = guess.lower()
    target = target.lower()
    if len(guess) != len(target):
        raise ValueError(f"guess must be {len(target)} letters long")

    states = [LetterState.ABSENT] * len(target)
    unmatched: Counter[str] = Counter()
    for index, (guessed, expected) in enumerate(zip(guess, target)):
        if guessed == expected:
            states[index] = LetterState.CORRECT
        else:
            unmatched[expected] += 1

    for index, guessed in enumerate(guess):
        if states[index] is LetterState.CORRECT:
            continue
        if unmatched[guessed] > 0:
            states[index] = LetterState.PRESENT
            unmatched[guessed] -= 1
    return states
