from __future__ import annotations

from dataclasses import dataclass

GUESSING_GAME_TYPE = "wordle"
ANAGRAM_GAME_TYPE = "anagram"


@dataclass(frozen=True, slots=True)
class ChallengeMode:
    code: str
    label: str
    max_attempts: int
    points: int
    scrambled_clue: bool = False


LEVEL_MODES: dict[int, ChallengeMode] = {
    1: ChallengeMode(code="level_1", label="Level 1", max_attempts=1, points=100),
    2: ChallengeMode(code="level_2", label="Level 2", max_attempts=1, points=150),
    3: ChallengeMode(code="level_3", label="Level 3", max_attempts=1, points=200),
}

GUESS_MODES: dict[str, ChallengeMode] = {
    "standard": ChallengeMode(code="standard", label="Standard Mode", max_attempts=6, points=100),
    "jumble": ChallengeMode(
        code="jumble",
        label="Jumble Mode",
        max_attempts=3,
        points=150,
        scrambled_clue=True,
    ),
    "sudden": ChallengeMode(code="sudden", label="Sudden Mode", max_attempts=1, points=250),
}


def level_mode(difficulty: int) -> ChallengeMode:
    """Returns the mode for a numeric level, clamped to the highest defined one."""
    highest = max(LEVEL_MODES)
    return LEVEL_MODES[max(1, min(difficulty, highest))]

