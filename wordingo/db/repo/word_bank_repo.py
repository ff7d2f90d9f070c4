from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wordingo.db.models.word_bank import WordBankItem


class WordBankRepo:
    @staticmethod
    async def list_by_type_and_difficulty(
        session: AsyncSession,
        *,
        game_type: str,
        difficulty: int,
    ) -> list[WordBankItem]:
        stmt = (
            select(WordBankItem)
            .where(
                WordBankItem.game_type == game_type,
                WordBankItem.difficulty == difficulty,
            )
            .order_by(WordBankItem.id.asc())
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def bulk_create(session: AsyncSession, *, items: list[WordBankItem]) -> None:
        session.add_all(items)
        await session.flush()
