from __future__ import annotations

import random
from collections.abc import AsyncIterator
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from tests.game.store_fakes import utc_settings
from wordingo.db.models import Base
from wordingo.db.repo.play_sessions_repo import PlaySessionsRepo
from wordingo.db.seed import GAME_TYPES, WORD_BANK, initialize_database, reset_database
from wordingo.db.session import build_session_factory
from wordingo.game.sessions.engine import SessionEngine
from wordingo.game.store.sql_store import SqlGameStore, StoreNotInitializedError

UTC = timezone.utc


@dataclass(slots=True)
class SqlHarness:
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    store: SqlGameStore


@pytest.fixture
async def sql(tmp_path: Path) -> AsyncIterator[SqlHarness]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'wordingo.db'}")
    session_factory = build_session_factory(engine)
    await initialize_database(engine, session_factory)
    try:
        yield SqlHarness(
            engine=engine,
            session_factory=session_factory,
            store=SqlGameStore(session_factory),
        )
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_seed_populates_catalog_in_insertion_order(sql: SqlHarness) -> None:
    catalog = await sql.store.get_game_catalog()

    assert [game.type for game in catalog] == [game_type for _, _, game_type in GAME_TYPES]
    assert [game.id for game in catalog] == sorted(game.id for game in catalog)


@pytest.mark.asyncio
async def test_seed_is_skipped_when_games_exist(sql: SqlHarness) -> None:
    assert await initialize_database(sql.engine, sql.session_factory) is False
    assert len(await sql.store.get_game_catalog()) == len(GAME_TYPES)


@pytest.mark.asyncio
async def test_question_bank_filters_by_type_and_difficulty(sql: SqlHarness) -> None:
    questions = await sql.store.get_question_bank("spelling", 1)

    expected = [row for row in WORD_BANK if row[0] == "spelling" and row[4] == 1]
    assert sorted(item.answer for item in questions) == sorted(row[2] for row in expected)
    assert all(item.game_type == "spelling" and item.difficulty == 1 for item in questions)
    assert await sql.store.get_question_bank("wordle", 1) == []


@pytest.mark.asyncio
async def test_session_rows_are_created_and_updated(sql: SqlHarness) -> None:
    first = await sql.store.create_session()
    second = await sql.store.create_session()
    end_time = datetime(2026, 3, 10, 12, 30, tzinfo=UTC)

    await sql.store.update_session(first, round_number=2, streak=4, score=500)
    await sql.store.update_session(first, end_time=end_time)

    async with sql.session_factory() as db:
        row = await PlaySessionsRepo.get_by_id(db, first)

    assert second == first + 1
    assert row is not None
    assert (row.round_number, row.streak, row.score) == (2, 4, 500)
    assert row.end_time is not None
    assert row.end_time.replace(tzinfo=None) == end_time.replace(tzinfo=None)


@pytest.mark.asyncio
async def test_update_unknown_session_raises(sql: SqlHarness) -> None:
    with pytest.raises(LookupError):
        await sql.store.update_session(999, streak=1)


@pytest.mark.asyncio
async def test_results_are_listed_per_session(sql: SqlHarness) -> None:
    catalog = await sql.store.get_game_catalog()
    first = await sql.store.create_session()
    second = await sql.store.create_session()

    await sql.store.append_result(first, catalog[0].id, is_correct=True, elapsed_ms=1200)
    await sql.store.append_result(
        first,
        catalog[2].id,
        is_correct=False,
        elapsed_ms=900,
        difficulty_tag="jumble",
    )
    await sql.store.append_result(second, catalog[1].id, is_correct=True, elapsed_ms=300)

    results = await sql.store.get_results_for_session(first)

    assert [(row.game_id, row.is_correct, row.time_taken, row.difficulty) for row in results] == [
        (catalog[0].id, True, 1200, None),
        (catalog[2].id, False, 900, "jumble"),
    ]
    assert await sql.store.get_results_for_session(12345) == []


@pytest.mark.asyncio
async def test_user_statistics_start_at_zero_and_update(sql: SqlHarness) -> None:
    stats = await sql.store.get_user_statistics()
    assert (stats.total_games, stats.longest_streak, stats.last_played, stats.daily_streak) == (
        0,
        0,
        None,
        0,
    )

    played_at = datetime(2026, 3, 10, 8, 15, tzinfo=UTC)
    await sql.store.update_user_statistics(last_played=played_at, daily_streak=3)
    await sql.store.update_user_statistics(total_games=7, longest_streak=5)

    stats = await sql.store.get_user_statistics()
    assert stats.total_games == 7
    assert stats.longest_streak == 5
    assert stats.daily_streak == 3
    assert stats.last_played == played_at


@pytest.mark.asyncio
async def test_missing_statistics_row_raises(tmp_path: Path) -> None:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'bare.db'}")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        store = SqlGameStore(build_session_factory(engine))

        with pytest.raises(StoreNotInitializedError):
            await store.get_user_statistics()
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_reset_database_drops_played_data(sql: SqlHarness) -> None:
    session_id = await sql.store.create_session()
    catalog = await sql.store.get_game_catalog()
    await sql.store.append_result(session_id, catalog[0].id, is_correct=True, elapsed_ms=10)
    await sql.store.update_user_statistics(total_games=3)

    await reset_database(sql.engine, sql.session_factory)

    assert await sql.store.get_results_for_session(session_id) == []
    assert (await sql.store.get_user_statistics()).total_games == 0
    assert len(await sql.store.get_game_catalog()) == len(GAME_TYPES)


@pytest.mark.asyncio
async def test_engine_plays_a_session_against_sqlite(sql: SqlHarness) -> None:
    engine = SessionEngine(sql.store, rng=random.Random(4), settings=utc_settings())
    session = await engine.start_new_session(["spelling"])

    challenge = await engine.get_next_game()
    assert challenge is not None
    assert (await engine.submit_answer(challenge.answer)).is_correct is True

    challenge = await engine.get_next_game()
    assert challenge is not None
    assert challenge.difficulty == 2
    assert (await engine.submit_answer("not even close")).is_correct is False

    summary = await engine.get_session_summary(session.session_id)
    stats = await sql.store.get_user_statistics()

    assert summary.total_games == 2
    assert summary.correct_answers == 1
    assert [entry.name for entry in summary.game_breakdown] == ["Spelling Bee"]
    assert stats.total_games == 1
    assert stats.longest_streak == 1
    assert stats.daily_streak == 1
    assert stats.last_played is not None
