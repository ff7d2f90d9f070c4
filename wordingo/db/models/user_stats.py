from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from wordingo.db.models.base import Base

USER_STATS_ROW_ID = 1


class UserStats(Base):
    __tablename__ = "user_stats"
    __table_args__ = (
        CheckConstraint("total_games >= 0", name="total_games_non_negative"),
        CheckConstraint("longest_streak >= 0", name="longest_streak_non_negative"),
        CheckConstraint("daily_streak >= 0", name="daily_streak_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    total_games: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    longest_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_played: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    daily_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
