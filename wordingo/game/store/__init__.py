from wordingo.game.store.protocol import GameStore
from wordingo.game.store.sql_store import SqlGameStore, StoreNotInitializedError
from wordingo.game.store.types import (
    GameCatalogEntry,
    QuestionRecord,
    ResultRecord,
    UserStatistics,
)

__all__ = [
    "GameCatalogEntry",
    "GameStore",
    "QuestionRecord",
    "ResultRecord",
    "SqlGameStore",
    "StoreNotInitializedError",
    "UserStatistics",
]
