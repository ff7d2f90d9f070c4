from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from wordingo.game.modes.catalog import ChallengeMode
from wordingo.game.store.types import GameCatalogEntry


@dataclass(slots=True)
class ChallengeLog:
    game_type: str
    answer: str
    mode_code: str
    is_correct: bool
    time_taken: int
    points: int


@dataclass(slots=True)
class SessionState:
    session_id: int
    available_games: tuple[GameCatalogEntry, ...]
    started_at: datetime
    current_round: int = 1
    current_streak: int = 0
    score: int = 0
    played_this_round: set[int] = field(default_factory=set)
    is_active: bool = True
    last_mode: str | None = None
    history: list[ChallengeLog] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ActiveChallenge:
    game: GameCatalogEntry
    mode: ChallengeMode
    prompt: str
    answer: str
    difficulty: int
    started_at: datetime
    options: tuple[str, ...] = ()
    clue: str | None = None
    question_id: int | None = None

    @property
    def max_attempts(self) -> int:
        return self.mode.max_attempts


@dataclass(frozen=True, slots=True)
class NoChallenge:
    pass


NO_CHALLENGE = NoChallenge()

ChallengeSlot = ActiveChallenge | NoChallenge


@dataclass(frozen=True, slots=True)
class AnswerResult:
    is_correct: bool
    correct_answer: str
    time_taken: int
    points: int


@dataclass(frozen=True, slots=True)
class BreakdownEntry:
    name: str
    played: int
    correct: int
    average_time: float


@dataclass(frozen=True, slots=True)
class SessionSummary:
    total_games: int
    correct_answers: int
    incorrect_answers: int
    average_time: float
    game_breakdown: tuple[BreakdownEntry, ...] = ()
    mode_breakdown: tuple[BreakdownEntry, ...] = ()
