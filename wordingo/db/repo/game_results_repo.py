from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wordingo.db.models.game_results import GameResult


class GameResultsRepo:
    @staticmethod
    async def create(session: AsyncSession, *, result: GameResult) -> GameResult:
        session.add(result)
        await session.flush()
        return result

    @staticmethod
    async def list_for_session(session: AsyncSession, session_id: int) -> list[GameResult]:
        stmt = (
            select(GameResult)
            .where(GameResult.session_id == session_id)
            .order_by(GameResult.id.asc())
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())
