from __future__ import annotations

from datetime import datetime
from typing import Protocol

from wordingo.game.store.types import (
    GameCatalogEntry,
    QuestionRecord,
    ResultRecord,
    UserStatistics,
)


class GameStore(Protocol):
    """Persistence operations the session engine depends on.

    Every call is awaited to completion by a single caller; implementations
    are not expected to provide cross-call transactions.
    """

    async def create_session(self) -> int: ...

    async def update_session(
        self,
        session_id: int,
        *,
        round_number: int | None = None,
        streak: int | None = None,
        score: int | None = None,
        end_time: datetime | None = None,
    ) -> None: ...

    async def get_game_catalog(self) -> list[GameCatalogEntry]: ...

    async def get_question_bank(self, game_type: str, difficulty: int) -> list[QuestionRecord]: ...

    async def append_result(
        self,
        session_id: int,
        game_type_id: int,
        *,
        is_correct: bool,
        elapsed_ms: int,
        difficulty_tag: str | None = None,
    ) -> None: ...

    async def get_results_for_session(self, session_id: int) -> list[ResultRecord]: ...

    async def get_user_statistics(self) -> UserStatistics: ...

    async def update_user_statistics(
        self,
        *,
        total_games: int | None = None,
        longest_streak: int | None = None,
        last_played: datetime | None = None,
        daily_streak: int | None = None,
    ) -> None: ...
