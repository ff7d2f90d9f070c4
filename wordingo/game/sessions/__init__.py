from wordingo.game.sessions.engine import SessionEngine
from wordingo.game.sessions.errors import ConfigurationError, GameSessionError, InvalidStateError
from wordingo.game.sessions.types import (
    NO_CHALLENGE,
    ActiveChallenge,
    AnswerResult,
    BreakdownEntry,
    NoChallenge,
    SessionState,
    SessionSummary,
)

__all__ = [
    "NO_CHALLENGE",
    "ActiveChallenge",
    "AnswerResult",
    "BreakdownEntry",
    "ConfigurationError",
    "GameSessionError",
    "InvalidStateError",
    "NoChallenge",
    "SessionEngine",
    "SessionState",
    "SessionSummary",
]
