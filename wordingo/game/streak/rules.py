from __future__ import annotations

from datetime import date, timedelta

PERFORMANCE_LEVELS: tuple[tuple[str, int, int], ...] = (
    # (label, min longest streak, min total games)
    ("Master", 20, 100),
    ("Expert", 15, 75),
    ("Advanced", 10, 50),
    ("Intermediate", 5, 25),
    ("Beginner", 0, 10),
)


def advance_daily_streak(
    *,
    last_played: date | None,
    today: date,
    daily_streak: int,
) -> tuple[int, bool]:
    if last_played == today:
        return daily_streak, False
    if last_played == today - timedelta(days=1):
        return daily_streak + 1, True
    return 1, True


def performance_level(total_games: int, longest_streak: int) -> str:
    for label, min_streak, min_games in PERFORMANCE_LEVELS:
        if longest_streak >= min_streak and total_games >= min_games:
            return label
    return "Newcomer"
