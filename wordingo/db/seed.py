from __future__ import annotations

import json

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from wordingo.db.models import Base, WordBankItem
from wordingo.db.repo.games_repo import GamesRepo
from wordingo.db.repo.user_stats_repo import UserStatsRepo
from wordingo.db.repo.word_bank_repo import WordBankRepo

logger = structlog.get_logger(__name__)

GAME_TYPES: tuple[tuple[str, str, str], ...] = (
    ("Anagram Solver", "Rearrange letters to form a word", "anagram"),
    ("Word Association", "Find the opposite or related word", "association"),
    ("Wordle", "Guess the 5-letter word", "wordle"),
    ("Odd One Out", "Find the word that doesn't belong", "odd_one_out"),
    ("Synonym Match", "Find the word with similar meaning", "synonym"),
    ("Spelling Bee", "Spell the word correctly", "spelling"),
)


def _choices(*options: str) -> str:
    return json.dumps(list(options))


# (game_type, question, answer, options, difficulty)
WORD_BANK: tuple[tuple[str, str, str, str | None, int], ...] = (
    ("anagram", "LISTEN", "SILENT", None, 1),
    ("anagram", "EARTH", "HEART", None, 1),
    ("anagram", "ANGEL", "GLEAN", None, 1),
    ("anagram", "BREAD", "BEARD", None, 1),
    ("anagram", "STRESSED", "DESSERTS", None, 2),
    ("anagram", "TEACHER", "CHEATER", None, 2),
    ("anagram", "DORMITORY", "DIRTY ROOM", None, 2),
    ("anagram", "ASTRONOMER", "MOON STARER", None, 3),
    ("anagram", "CONVERSATION", "VOICES RANT ON", None, 3),
    ("association", "Hot", "Cold", _choices("Cold", "Warm", "Fire", "Ice"), 1),
    ("association", "Up", "Down", _choices("Down", "High", "Top", "Above"), 1),
    ("association", "Big", "Small", _choices("Small", "Large", "Huge", "Giant"), 1),
    ("association", "Fast", "Slow", _choices("Slow", "Quick", "Rapid", "Swift"), 1),
    ("association", "Abundant", "Scarce", _choices("Scarce", "Plenty", "Rich", "Full"), 2),
    ("association", "Ancient", "Modern", _choices("Modern", "Old", "Historic", "Vintage"), 2),
    ("association", "Benevolent", "Malicious", _choices("Malicious", "Kind", "Generous", "Gentle"), 3),
    ("odd_one_out", "Apple, Orange, Car, Banana", "Car", _choices("Apple", "Orange", "Car", "Banana"), 1),
    ("odd_one_out", "Dog, Cat, Fish, Chair", "Chair", _choices("Dog", "Cat", "Fish", "Chair"), 1),
    ("odd_one_out", "Red, Blue, Green, Book", "Book", _choices("Red", "Blue", "Green", "Book"), 1),
    (
        "odd_one_out",
        "Mercury, Venus, Earth, Jupiter",
        "Jupiter",
        _choices("Mercury", "Venus", "Earth", "Jupiter"),
        2,
    ),
    (
        "odd_one_out",
        "Piano, Guitar, Violin, Painting",
        "Painting",
        _choices("Piano", "Guitar", "Violin", "Painting"),
        2,
    ),
    ("synonym", "Happy", "Joyful", _choices("Sad", "Joyful", "Angry", "Tired"), 1),
    ("synonym", "Big", "Large", _choices("Small", "Large", "Tiny", "Mini"), 1),
    ("synonym", "Smart", "Clever", _choices("Dumb", "Clever", "Slow", "Lazy"), 1),
    ("synonym", "Magnificent", "Splendid", _choices("Terrible", "Splendid", "Awful", "Poor"), 2),
    ("synonym", "Abundant", "Plentiful", _choices("Scarce", "Plentiful", "Rare", "Limited"), 2),
    ("synonym", "Ephemeral", "Fleeting", _choices("Fleeting", "Eternal", "Solid", "Heavy"), 3),
    ("spelling", "A large African animal with a trunk", "elephant", None, 1),
    ("spelling", "The color of grass", "green", None, 1),
    ("spelling", "A vehicle with four wheels", "car", None, 1),
    ("spelling", "The study of living organisms", "biology", None, 2),
    ("spelling", "A person who designs buildings", "architect", None, 2),
    ("spelling", "Required to be done or present; essential", "necessary", None, 3),
)


async def seed_initial_data(session: AsyncSession) -> bool:
    """Insert the game catalog, the statistics row and the word bank.

    Returns False without touching anything when games already exist.
    """
    if await GamesRepo.count(session) > 0:
        logger.info("seed_skipped_games_exist")
        return False

    for name, description, game_type in GAME_TYPES:
        await GamesRepo.create(session, name=name, description=description, game_type=game_type)

    if await UserStatsRepo.get(session) is None:
        await UserStatsRepo.create_default(session)

    await WordBankRepo.bulk_create(
        session,
        items=[
            WordBankItem(
                game_type=game_type,
                question=question,
                answer=answer,
                options=options,
                difficulty=difficulty,
            )
            for game_type, question, answer, options, difficulty in WORD_BANK
        ],
    )
    logger.info("seed_completed", games=len(GAME_TYPES), word_bank_items=len(WORD_BANK))
    return True


async def initialize_database(
    engine: AsyncEngine,
    session_factory: async_sessionmaker[AsyncSession],
) -> bool:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with session_factory.begin() as session:
        return await seed_initial_data(session)


async def reset_database(
    engine: AsyncEngine,
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    logger.warning("database_reset_started", url=engine.url.render_as_string(hide_password=True))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await initialize_database(engine, session_factory)
    logger.info("database_reset_completed")
