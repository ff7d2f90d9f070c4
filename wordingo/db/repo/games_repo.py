from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wordingo.db.models.games import Game


class GamesRepo:
    @staticmethod
    async def list_all(session: AsyncSession) -> list[Game]:
        stmt = select(Game).order_by(Game.id.asc())
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def count(session: AsyncSession) -> int:
        result = await session.execute(select(func.count(Game.id)))
        return int(result.scalar_one() or 0)

    @staticmethod
    async def create(session: AsyncSession, *, name: str, description: str, game_type: str) -> Game:
        game = Game(name=name, description=description, type=game_type)
        session.add(game)
        await session.flush()
        return game
