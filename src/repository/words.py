# -*- coding: utf-8 -*-
"""
QuizService/src/repository/words.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Репозиторий словарных статей, на которые ссылаются вопросы.
"""

from typing import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models import Word


async def count_existing_words(session: AsyncSession, word_ids: Iterable[int]) -> int:
    """Количество существующих слов среди переданных ID (повторы не учитываются)."""
    unique_ids = set(word_ids)
    if not unique_ids:
        return 0
    stmt = select(func.count()).select_from(Word).where(Word.id.in_(unique_ids))
    result = await session.execute(stmt)
    return result.scalar_one()
