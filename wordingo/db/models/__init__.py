from wordingo.db.models.base import Base
from wordingo.db.models.game_results import GameResult
from wordingo.db.models.games import Game
from wordingo.db.models.play_sessions import PlaySession
from wordingo.db.models.user_stats import UserStats
from wordingo.db.models.word_bank import WordBankItem

__all__ = [
    "Base",
    "Game",
    "GameResult",
    "PlaySession",
    "UserStats",
    "WordBankItem",
]
