from __future__ import annotations

import argparse
import asyncio
import random
from collections.abc import Callable, Sequence

from wordingo.core.config import get_settings
from wordingo.core.logging import configure_logging
from wordingo.db.seed import initialize_database, reset_database
from wordingo.db.session import build_engine, build_session_factory
from wordingo.game.modes.catalog import GUESSING_GAME_TYPE
from wordingo.game.questions.wordle import WORD_LENGTH, LetterState, evaluate_guess
from wordingo.game.sessions.engine import SessionEngine
from wordingo.game.sessions.errors import ConfigurationError
from wordingo.game.sessions.types import ActiveChallenge, SessionSummary
from wordingo.game.store.protocol import GameStore
from wordingo.game.store.sql_store import SqlGameStore
from wordingo.game.streak.rules import performance_level

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]

_LETTER_MARKS = {
    LetterState.CORRECT: "+",
    LetterState.PRESENT: "?",
    LetterState.ABSENT: "-",
}


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wordingo", description="Casual word-puzzle game.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="Create tables and seed the catalog and word bank.")
    commands.add_parser("reset-db", help="Drop all tables, recreate and reseed them.")
    commands.add_parser("stats", help="Show lifetime statistics.")

    play = commands.add_parser("play", help="Play a session in the terminal.")
    play.add_argument(
        "--game",
        dest="game_types",
        action="append",
        help="Restrict the session to a game type (repeatable), e.g. --game anagram.",
    )
    play.add_argument("--seed", type=int, default=None, help="Seed for reproducible sessions.")
    return parser.parse_args(argv)


def _resolve_option(raw: str, options: Sequence[str]) -> str:
    choice = raw.strip()
    if choice.isdigit() and 1 <= int(choice) <= len(options):
        return options[int(choice) - 1]
    return choice


def _read_guesses(challenge: ActiveChallenge, read_line: ReadLine, write: WriteLine) -> str:
    guess = ""
    attempt = 0
    while attempt < challenge.max_attempts:
        guess = read_line(f"Guess {attempt + 1}/{challenge.max_attempts}: ").strip()
        if len(guess) != WORD_LENGTH:
            write(f"Your guess must be {WORD_LENGTH} letters long")
            continue
        attempt += 1
        states = evaluate_guess(guess, challenge.answer)
        write(f"  {' '.join(guess.upper())}")
        write(f"  {' '.join(_LETTER_MARKS[state] for state in states)}")
        if guess.lower() == challenge.answer.lower():
            break
    return guess


def _format_summary(summary: SessionSummary) -> list[str]:
    lines = [
        f"Games: {summary.total_games}  Correct: {summary.correct_answers}  "
        f"Incorrect: {summary.incorrect_answers}  Avg time: {summary.average_time / 1000:.1f}s",
    ]
    for entry in (*summary.game_breakdown, *summary.mode_breakdown):
        lines.append(
            f"  {entry.name}: {entry.correct}/{entry.played} correct, "
            f"avg {entry.average_time / 1000:.1f}s"
        )
    return lines


async def play_session(
    engine: SessionEngine,
    *,
    game_types: Sequence[str] | None,
    read_line: ReadLine,
    write: WriteLine,
) -> SessionSummary:
    session = await engine.start_new_session(game_types)
    while True:
        challenge = await engine.get_next_game()
        if challenge is None:
            break

        write(
            f"Round {session.current_round} | Streak {session.current_streak} | "
            f"{challenge.game.name} ({challenge.mode.label})"
        )
        write(challenge.prompt)
        if challenge.clue:
            write(f"Clue: {challenge.clue}")
        for index, option in enumerate(challenge.options, start=1):
            write(f"  {index}. {option}")

        if challenge.game.type == GUESSING_GAME_TYPE:
            answer = _read_guesses(challenge, read_line, write)
        else:
            answer = _resolve_option(read_line("> "), challenge.options)

        result = await engine.submit_answer(answer)
        if not result.is_correct:
            write(f"Wrong! The answer was {result.correct_answer}.")
            break
        write(f"Correct! +{result.points} points")

    summary = await engine.get_session_summary(session.session_id)
    write(f"Session over. Streak {session.current_streak}, score {session.score}.")
    for line in _format_summary(summary):
        write(line)

    if session.is_active:
        await engine.end_session(completed=True)
    else:
        engine.cleanup_session()
    return summary


async def _show_stats(store: GameStore, write: WriteLine) -> None:
    stats = await store.get_user_statistics()
    write(f"Total games:    {stats.total_games}")
    write(f"Longest streak: {stats.longest_streak}")
    write(f"Daily streak:   {stats.daily_streak}")
    last_played = stats.last_played.isoformat() if stats.last_played else "never"
    write(f"Last played:    {last_played}")
    write(f"Level:          {performance_level(stats.total_games, stats.longest_streak)}")


async def _run(args: argparse.Namespace) -> int:
    settings = get_settings()
    db_engine = build_engine(settings)
    session_factory = build_session_factory(db_engine)
    try:
        if args.command == "init-db":
            seeded = await initialize_database(db_engine, session_factory)
            print("database seeded" if seeded else "database already seeded")  # noqa: T201
        elif args.command == "reset-db":
            await reset_database(db_engine, session_factory)
            print("database reset")  # noqa: T201
        elif args.command == "stats":
            await _show_stats(SqlGameStore(session_factory), print)
        elif args.command == "play":
            rng = random.Random(args.seed) if args.seed is not None else None
            engine = SessionEngine(SqlGameStore(session_factory), rng=rng, settings=settings)
            try:
                await play_session(engine, game_types=args.game_types, read_line=input, write=print)
            except ConfigurationError as exc:
                print(f"cannot start a session: {exc}")  # noqa: T201
                return 2
    finally:
        await db_engine.dispose()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(get_settings().log_level)
    try:
        return asyncio.run(_run(args))
    except (KeyboardInterrupt, EOFError):
        return 130


if __name__ == "__main__":
    raise SystemExit(main(argv=None))
