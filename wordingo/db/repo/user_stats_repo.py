from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from wordingo.db.models.user_stats import USER_STATS_ROW_ID, UserStats


class UserStatsRepo:
    @staticmethod
    async def get(session: AsyncSession) -> UserStats | None:
        return await session.get(UserStats, USER_STATS_ROW_ID)

    @staticmethod
    async def create_default(session: AsyncSession) -> UserStats:
        stats = UserStats(
            id=USER_STATS_ROW_ID,
            total_games=0,
            longest_streak=0,
            last_played=None,
            daily_streak=0,
        )
        session.add(stats)
        await session.flush()
        return stats
