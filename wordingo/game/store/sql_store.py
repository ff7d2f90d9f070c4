from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from wordingo.db.models.game_results import GameResult
from wordingo.db.models.user_stats import UserStats
from wordingo.db.repo.game_results_repo import GameResultsRepo
from wordingo.db.repo.games_repo import GamesRepo
from wordingo.db.repo.play_sessions_repo import PlaySessionsRepo
from wordingo.db.repo.user_stats_repo import UserStatsRepo
from wordingo.db.repo.word_bank_repo import WordBankRepo
from wordingo.game.store.types import (
    GameCatalogEntry,
    QuestionRecord,
    ResultRecord,
    UserStatistics,
)

UTC = timezone.utc


class StoreNotInitializedError(RuntimeError):
    pass


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class SqlGameStore:
    """`GameStore` backed by SQLAlchemy; one transaction per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create_session(self) -> int:
        async with self._session_factory.begin() as db:
            play_session = await PlaySessionsRepo.create(db, start_time=datetime.now(UTC))
            return play_session.id

    async def update_session(
        self,
        session_id: int,
        *,
        round_number: int | None = None,
        streak: int | None = None,
        score: int | None = None,
        end_time: datetime | None = None,
    ) -> None:
        async with self._session_factory.begin() as db:
            play_session = await PlaySessionsRepo.get_by_id(db, session_id)
            if play_session is None:
                raise LookupError(f"session {session_id} does not exist")
            if round_number is not None:
                play_session.round_number = round_number
            if streak is not None:
                play_session.streak = streak
            if score is not None:
                play_session.score = score
            if end_time is not None:
                play_session.end_time = end_time

    async def get_game_catalog(self) -> list[GameCatalogEntry]:
        async with self._session_factory() as db:
            games = await GamesRepo.list_all(db)
        return [
            GameCatalogEntry(id=game.id, name=game.name, type=game.type, description=game.description)
            for game in games
        ]

    async def get_question_bank(self, game_type: str, difficulty: int) -> list[QuestionRecord]:
        async with self._session_factory() as db:
            items = await WordBankRepo.list_by_type_and_difficulty(
                db,
                game_type=game_type,
                difficulty=difficulty,
            )
        return [
            QuestionRecord(
                id=item.id,
                game_type=item.game_type,
                question=item.question,
                answer=item.answer,
                options=item.options,
                difficulty=item.difficulty,
            )
            for item in items
        ]

    async def append_result(
        self,
        session_id: int,
        game_type_id: int,
        *,
        is_correct: bool,
        elapsed_ms: int,
        difficulty_tag: str | None = None,
    ) -> None:
        async with self._session_factory.begin() as db:
            await GameResultsRepo.create(
                db,
                result=GameResult(
                    session_id=session_id,
                    game_id=game_type_id,
                    is_correct=is_correct,
                    time_taken=elapsed_ms,
                    difficulty=difficulty_tag,
                ),
            )

    async def get_results_for_session(self, session_id: int) -> list[ResultRecord]:
        async with self._session_factory() as db:
            rows = await GameResultsRepo.list_for_session(db, session_id)
        return [
            ResultRecord(
                id=row.id,
                session_id=row.session_id,
                game_id=row.game_id,
                is_correct=row.is_correct,
                time_taken=row.time_taken,
                difficulty=row.difficulty,
            )
            for row in rows
        ]

    async def get_user_statistics(self) -> UserStatistics:
        async with self._session_factory() as db:
            stats = await self._require_stats(db)
            return UserStatistics(
                total_games=stats.total_games,
                longest_streak=stats.longest_streak,
                last_played=_as_utc(stats.last_played),
                daily_streak=stats.daily_streak,
            )

    async def update_user_statistics(
        self,
        *,
        total_games: int | None = None,
        longest_streak: int | None = None,
        last_played: datetime | None = None,
        daily_streak: int | None = None,
    ) -> None:
        async with self._session_factory.begin() as db:
            stats = await self._require_stats(db)
            if total_games is not None:
                stats.total_games = total_games
            if longest_streak is not None:
                stats.longest_streak = longest_streak
            if last_played is not None:
                stats.last_played = last_played
            if daily_streak is not None:
                stats.daily_streak = daily_streak

    @staticmethod
    async def _require_stats(db: AsyncSession) -> UserStats:
        stats = await UserStatsRepo.get(db)
        if stats is None:
            raise StoreNotInitializedError("user_stats row is missing; run `wordingo init-db`")
        return stats
