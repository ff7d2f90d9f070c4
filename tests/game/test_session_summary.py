from __future__ import annotations

from tests.game.store_fakes import ANAGRAM, SPELLING, WORDLE
from wordingo.game.sessions.summary import build_session_summary
from wordingo.game.sessions.types import BreakdownEntry
from wordingo.game.store.types import ResultRecord

CATALOG = [ANAGRAM, SPELLING, WORDLE]


def result(
    game_id: int,
    *,
    is_correct: bool,
    time_taken: int,
    difficulty: str | None = None,
) -> ResultRecord:
    return ResultRecord(
        session_id=1,
        game_id=game_id,
        is_correct=is_correct,
        time_taken=time_taken,
        difficulty=difficulty,
    )


def test_summary_counts_and_average_time() -> None:
    results = [
        result(ANAGRAM.id, is_correct=True, time_taken=1000),
        result(SPELLING.id, is_correct=True, time_taken=2000),
        result(ANAGRAM.id, is_correct=False, time_taken=3000),
    ]

    summary = build_session_summary(results, CATALOG)

    assert summary.total_games == 3
    assert summary.correct_answers == 2
    assert summary.incorrect_answers == 1
    assert summary.average_time == 2000


def test_summary_of_empty_session_is_all_zero() -> None:
    summary = build_session_summary([], CATALOG)

    assert summary.total_games == 0
    assert summary.correct_answers == 0
    assert summary.incorrect_answers == 0
    assert summary.average_time == 0
    assert summary.game_breakdown == ()
    assert summary.mode_breakdown == ()


def test_game_breakdown_follows_catalog_order_and_skips_unplayed() -> None:
    results = [
        result(SPELLING.id, is_correct=True, time_taken=500),
        result(ANAGRAM.id, is_correct=True, time_taken=1000),
        result(ANAGRAM.id, is_correct=False, time_taken=2000),
    ]

    summary = build_session_summary(results, CATALOG)

    assert summary.game_breakdown == (
        BreakdownEntry(name="Anagram", played=2, correct=1, average_time=1500),
        BreakdownEntry(name="Spelling Bee", played=1, correct=1, average_time=500),
    )


def test_mode_breakdown_groups_guessing_results() -> None:
    results = [
        result(WORDLE.id, is_correct=True, time_taken=4000, difficulty="standard"),
        result(WORDLE.id, is_correct=True, time_taken=6000, difficulty="sudden"),
        result(WORDLE.id, is_correct=False, time_taken=2000, difficulty="standard"),
        result(SPELLING.id, is_correct=True, time_taken=1000, difficulty="level_1"),
    ]

    summary = build_session_summary(results, CATALOG)

    assert summary.mode_breakdown == (
        BreakdownEntry(name="Standard Mode", played=2, correct=1, average_time=3000),
        BreakdownEntry(name="Sudden Mode", played=1, correct=1, average_time=6000),
    )


def test_summary_is_stable_for_the_same_results() -> None:
    results = [result(ANAGRAM.id, is_correct=True, time_taken=1200)]

    assert build_session_summary(results, CATALOG) == build_session_summary(results, CATALOG)
