from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from wordingo.db.models.play_sessions import PlaySession


class PlaySessionsRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, session_id: int) -> PlaySession | None:
        return await session.get(PlaySession, session_id)

    @staticmethod
    async def create(session: AsyncSession, *, start_time: datetime) -> PlaySession:
        play_session = PlaySession(start_time=start_time, score=0, streak=0, round_number=1)
        session.add(play_session)
        await session.flush()
        return play_session
