from __future__ import annotations

from collections.abc import Iterable, Sequence

from wordingo.game.modes.catalog import GUESS_MODES
from wordingo.game.sessions.types import BreakdownEntry, SessionSummary
from wordingo.game.store.types import GameCatalogEntry, ResultRecord


def _average_time(results: Sequence[ResultRecord]) -> float:
    if not results:
        return 0
    return sum(result.time_taken for result in results) / len(results)


def _breakdown_entry(name: str, results: Sequence[ResultRecord]) -> BreakdownEntry:
    return BreakdownEntry(
        name=name,
        played=len(results),
        correct=sum(1 for result in results if result.is_correct),
        average_time=_average_time(results),
    )


def build_session_summary(
    results: Sequence[ResultRecord],
    catalog: Iterable[GameCatalogEntry],
) -> SessionSummary:
    game_breakdown: list[BreakdownEntry] = []
    for game in catalog:
        played = [result for result in results if result.game_id == game.id]
        if played:
            game_breakdown.append(_breakdown_entry(game.name, played))

    mode_breakdown: list[BreakdownEntry] = []
    for mode in GUESS_MODES.values():
        played = [result for result in results if result.difficulty == mode.code]
        if played:
            mode_breakdown.append(_breakdown_entry(mode.label, played))

    correct = sum(1 for result in results if result.is_correct)
    return SessionSummary(
        total_games=len(results),
        correct_answers=correct,
        incorrect_answers=len(results) - correct,
        average_time=_average_time(results),
        game_breakdown=tuple(game_breakdown),
        mode_breakdown=tuple(mode_breakdown),
    )
