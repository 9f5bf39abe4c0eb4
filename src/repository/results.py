# -*- coding: utf-8 -*-
"""
QuizService/src/repository/results.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Репозиторий результатов пользователей по тестам.
"""

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.logger import configure_logger
from src.domain.models import Result
from src.repository.base import create_item

logger = configure_logger()


async def list_user_results(
    session: AsyncSession, user_id: int, test_ids: Iterable[int]
) -> List[Result]:
    """Результаты пользователя по указанным тестам."""
    ids = list(test_ids)
    if not ids:
        return []
    stmt = (
        select(Result)
        .where(Result.user_id == user_id, Result.test_id.in_(ids))
        .order_by(Result.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_result(
    session: AsyncSession, user_id: int, test_id: int
) -> Optional[Result]:
    """Результат пользователя по тесту, если он есть."""
    stmt = select(Result).where(Result.user_id == user_id, Result.test_id == test_id)
    result = await session.execute(stmt)
    return result.scalars().first()


async def get_or_create_result(
    session: AsyncSession, user_id: int, test_id: int
) -> Result:
    """
    Получить результат пользователя по тесту, создав пустой при первом обращении.

    Уникальный индекс ``(user_id, test_id)`` не даёт параллельным запросам
    создать дубликат: проигравший запрос перечитывает уже созданную запись.
    """
    existing = await get_result(session, user_id, test_id)
    if existing is not None:
        return existing

    try:
        created = await create_item(
            session,
            Result,
            user_id=user_id,
            test_id=test_id,
            answers={},
            score=0,
            is_completed=False,
        )
    except IntegrityError:
        await session.rollback()
        existing = await get_result(session, user_id, test_id)
        if existing is None:
            raise
        logger.warning(
            f"⚠️ Результат пользователя {user_id} по тесту {test_id} уже создан параллельным запросом"
        )
        return existing

    logger.info(f"Создан результат {created.id} для пользователя {user_id}, тест {test_id}")
    return created
