from __future__ import annotations

import json
import random
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone
from typing import TypeVar

import structlog

from wordingo.core.config import Settings, get_settings
from wordingo.game.modes.catalog import (
    GUESS_MODES,
    GUESSING_GAME_TYPE,
    ChallengeMode,
    level_mode,
)
from wordingo.game.questions.answers import shuffle_items, validate_answer
from wordingo.game.questions.wordle import WORD_LENGTH, pick_word, scramble_word
from wordingo.game.sessions.errors import ConfigurationError, InvalidStateError
from wordingo.game.sessions.summary import build_session_summary
from wordingo.game.sessions.types import (
    NO_CHALLENGE,
    ActiveChallenge,
    AnswerResult,
    ChallengeLog,
    ChallengeSlot,
    SessionState,
    SessionSummary,
)
from wordingo.game.store.protocol import GameStore
from wordingo.game.store.types import GameCatalogEntry
from wordingo.game.streak.rules import advance_daily_streak
from wordingo.game.streak.time import local_date

T = TypeVar("T")

logger = structlog.get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_options(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [str(option) for option in json.loads(raw)]


class SessionEngine:
    """Runs one play session at a time against a `GameStore`.

    The caller drives the loop: `start_new_session`, then alternate
    `get_next_game` and `submit_answer` until an answer is wrong, then read
    `get_session_summary` and call `cleanup_session`. Calls must not overlap.
    """

    def __init__(
        self,
        store: GameStore,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._store = store
        self._rng = rng or random.Random()
        self._clock = clock or _utc_now
        self._settings = settings or get_settings()
        self._session: SessionState | None = None
        self._challenge: ChallengeSlot = NO_CHALLENGE

    async def start_new_session(self, game_types: Iterable[str] | None = None) -> SessionState:
        catalog = await self._store.get_game_catalog()
        if not catalog:
            raise ConfigurationError("game catalog is empty")
        if game_types is not None:
            wanted = set(game_types)
            catalog = [game for game in catalog if game.type in wanted]
            if not catalog:
                raise ConfigurationError(f"no game type matches {sorted(wanted)}")

        session_id = await self._store.create_session()
        now = self._clock()
        await self._update_daily_streak(now)

        self._session = SessionState(
            session_id=session_id,
            available_games=tuple(catalog),
            started_at=now,
        )
        self._challenge = NO_CHALLENGE
        logger.info(
            "session_started",
            session_id=session_id,
            game_types=[game.type for game in catalog],
        )
        return self._session

    async def get_next_game(self) -> ActiveChallenge | None:
        session = self._session
        if session is None or not session.is_active:
            return None

        if len(session.played_this_round) >= len(session.available_games):
            next_round = session.current_round + 1
            await self._store.update_session(session.session_id, round_number=next_round)
            session.current_round = next_round
            session.played_this_round.clear()
            logger.info("round_advanced", session_id=session.session_id, round=next_round)

        remaining = [
            game for game in session.available_games if game.id not in session.played_this_round
        ]
        if not remaining:
            return None

        game = self._rng.choice(remaining)
        difficulty = min(session.current_round, self._settings.max_difficulty)
        if game.type == GUESSING_GAME_TYPE:
            challenge = self._build_guess_challenge(game, difficulty, previous_mode=session.last_mode)
            session.last_mode = challenge.mode.code
        else:
            bank_challenge = await self._build_bank_challenge(game, difficulty)
            if bank_challenge is None:
                return None
            challenge = bank_challenge

        session.played_this_round.add(game.id)
        self._challenge = challenge
        logger.info(
            "challenge_served",
            session_id=session.session_id,
            round=session.current_round,
            game_type=game.type,
            mode=challenge.mode.code,
        )
        return challenge

    async def submit_answer(self, raw_answer: str) -> AnswerResult:
        session = self._session
        challenge = self._challenge
        if session is None or not session.is_active:
            raise InvalidStateError("no active session")
        if not isinstance(challenge, ActiveChallenge):
            raise InvalidStateError("no active challenge; call get_next_game first")

        now = self._clock()
        time_taken = max(0, int((now - challenge.started_at).total_seconds() * 1000))
        is_correct = validate_answer(
            challenge.game.type,
            raw_answer,
            challenge.answer,
            challenge.options,
        )
        points = challenge.mode.points if is_correct else 0
        correct_answer = challenge.answer

        await self._store.append_result(
            session.session_id,
            challenge.game.id,
            is_correct=is_correct,
            elapsed_ms=time_taken,
            difficulty_tag=challenge.mode.code,
        )

        if is_correct:
            streak = session.current_streak + 1
            score = session.score + points
            await self._store.update_session(session.session_id, streak=streak, score=score)
            session.current_streak = streak
            session.score = score
            self._challenge = NO_CHALLENGE
        else:
            await self._store.update_session(session.session_id, end_time=now)
            await self._record_session_totals(session.current_streak)
            session.is_active = False

        session.history.append(
            ChallengeLog(
                game_type=challenge.game.type,
                answer=correct_answer,
                mode_code=challenge.mode.code,
                is_correct=is_correct,
                time_taken=time_taken,
                points=points,
            )
        )
        logger.info(
            "answer_submitted",
            session_id=session.session_id,
            game_type=challenge.game.type,
            is_correct=is_correct,
            time_taken=time_taken,
            streak=session.current_streak,
            session_active=session.is_active,
        )
        return AnswerResult(
            is_correct=is_correct,
            correct_answer=correct_answer,
            time_taken=time_taken,
            points=points,
        )

    async def end_session(self, completed: bool = True) -> None:
        session = self._session
        if session is None:
            return

        # A session already closed by a wrong answer has been counted.
        if session.is_active:
            await self._store.update_session(session.session_id, end_time=self._clock())
            await self._record_session_totals(session.current_streak)
            session.is_active = False

        logger.info(
            "session_ended",
            session_id=session.session_id,
            completed=completed,
            streak=session.current_streak,
            score=session.score,
        )
        self._session = None
        self._challenge = NO_CHALLENGE

    def cleanup_session(self) -> None:
        self._session = None
        self._challenge = NO_CHALLENGE

    def get_current_session(self) -> SessionState | None:
        return self._session

    def get_current_game(self) -> ActiveChallenge | None:
        if isinstance(self._challenge, ActiveChallenge):
            return self._challenge
        return None

    async def get_session_summary(self, session_id: int) -> SessionSummary:
        results = await self._store.get_results_for_session(session_id)
        catalog = await self._store.get_game_catalog()
        return build_session_summary(results, catalog)

    def validate_answer(
        self,
        game_type: str,
        user_answer: str,
        correct_answer: str,
        options: Sequence[str] | None = None,
    ) -> bool:
        return validate_answer(game_type, user_answer, correct_answer, options)

    def shuffle_array(self, items: Sequence[T]) -> list[T]:
        return shuffle_items(items, self._rng)

    def _pick_guess_mode(self, previous_mode: str | None) -> ChallengeMode:
        candidates = [mode for mode in GUESS_MODES.values() if mode.code != previous_mode]
        return self._rng.choice(candidates or list(GUESS_MODES.values()))

    def _build_guess_challenge(
        self,
        game: GameCatalogEntry,
        difficulty: int,
        *,
        previous_mode: str | None,
    ) -> ActiveChallenge:
        mode = self._pick_guess_mode(previous_mode)
        word = pick_word(self._rng)
        return ActiveChallenge(
            game=game,
            mode=mode,
            prompt=f"Guess the {WORD_LENGTH}-letter word",
            answer=word,
            difficulty=difficulty,
            clue=scramble_word(word, self._rng) if mode.scrambled_clue else None,
            started_at=self._clock(),
        )

    async def _build_bank_challenge(
        self,
        game: GameCatalogEntry,
        difficulty: int,
    ) -> ActiveChallenge | None:
        questions = await self._store.get_question_bank(game.type, difficulty)
        if not questions and difficulty != 1:
            logger.info("question_bank_fallback", game_type=game.type, difficulty=difficulty)
            difficulty = 1
            questions = await self._store.get_question_bank(game.type, difficulty)
        if not questions:
            logger.warning("question_bank_empty", game_type=game.type)
            return None

        question = self._rng.choice(questions)
        return ActiveChallenge(
            game=game,
            mode=level_mode(difficulty),
            prompt=question.question,
            answer=question.answer,
            difficulty=difficulty,
            options=tuple(self.shuffle_array(_parse_options(question.options))),
            question_id=question.id,
            started_at=self._clock(),
        )

    async def _record_session_totals(self, streak: int) -> None:
        # total_games grows by the streak length, not by questions answered.
        stats = await self._store.get_user_statistics()
        await self._store.update_user_statistics(
            total_games=stats.total_games + streak,
            longest_streak=max(stats.longest_streak, streak),
        )

    async def _update_daily_streak(self, now: datetime) -> None:
        tz_name = self._settings.timezone
        stats = await self._store.get_user_statistics()
        last_played = local_date(stats.last_played, tz_name) if stats.last_played else None
        daily_streak, changed = advance_daily_streak(
            last_played=last_played,
            today=local_date(now, tz_name),
            daily_streak=stats.daily_streak,
        )
        if not changed:
            return
        await self._store.update_user_statistics(last_played=now, daily_streak=daily_streak)
        logger.info("daily_streak_updated", daily_streak=daily_streak)
