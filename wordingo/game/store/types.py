from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class GameCatalogEntry:
    id: int
    name: str
    type: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    id: int
    game_type: str
    question: str
    answer: str
    options: str | None = None
    difficulty: int = 1


@dataclass(frozen=True, slots=True)
class ResultRecord:
    session_id: int
    game_id: int
    is_correct: bool
    time_taken: int
    difficulty: str | None = None
    id: int | None = None


@dataclass(frozen=True, slots=True)
class UserStatistics:
    total_games: int
    longest_streak: int
    last_played: datetime | None
    daily_streak: int
