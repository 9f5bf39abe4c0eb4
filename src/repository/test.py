# -*- coding: utf-8 -*-
"""
QuizService/src/repository/test.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Repository for Test entities.

This module provides data access operations for tests and their ordered
question links: listing, retrieval, creation and in-place updates.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.config.logger import configure_logger
from src.domain.models import Question, Test, TestQuestion

logger = configure_logger()


def _links(question_ids: Sequence[int]) -> List[TestQuestion]:
    return [
        TestQuestion(position=position, question_id=question_id)
        for position, question_id in enumerate(question_ids)
    ]


# ----------------------------- Test reads ----------------------------------


async def list_tests(session: AsyncSession, public_only: bool = False) -> List[Test]:
    """
    Получить все тесты (или только публичные).

    У каждого теста подгружаются ссылки на вопросы, а у вопросов - только
    ``id`` и ``correct_answer``.
    """
    stmt = (
        select(Test)
        .options(
            selectinload(Test.question_links)
            .selectinload(TestQuestion.question)
            .load_only(Question.id, Question.correct_answer)
        )
        .order_by(Test.id)
    )
    if public_only:
        stmt = stmt.where(Test.is_public.is_(True))

    result = await session.execute(stmt)
    tests = list(result.scalars().all())
    logger.debug(f"Получено {len(tests)} тестов (public_only={public_only})")
    return tests


async def get_test(
    session: AsyncSession, test_id: int, public_only: bool = False
) -> Optional[Test]:
    """Получить тест по ID вместе со ссылками на вопросы."""
    stmt = (
        select(Test)
        .where(Test.id == test_id)
        .options(selectinload(Test.question_links))
    )
    if public_only:
        stmt = stmt.where(Test.is_public.is_(True))

    result = await session.execute(stmt)
    test = result.scalars().first()
    if test is None:
        logger.debug(f"Тест {test_id} не найден (public_only={public_only})")
    return test


# ----------------------------- Test writes ---------------------------------


async def create_test(
    session: AsyncSession,
    title: str,
    description: str,
    question_ids: Sequence[int],
    image: Optional[str] = None,
) -> Test:
    """Создать тест со ссылками на вопросы в заданном порядке."""
    test = Test(
        title=title,
        description=description,
        image=image,
        question_links=_links(question_ids),
    )
    session.add(test)
    await session.commit()
    logger.info(f"Создан тест {test.id} с {len(question_ids)} вопросами")
    return test


async def update_test(
    session: AsyncSession,
    test_id: int,
    values: Dict[str, Any],
    question_ids: Optional[Sequence[int]] = None,
) -> bool:
    """
    Перезаписать поля теста и (опционально) список его вопросов.

    Returns:
        True, если тест с таким ID существует.
    """
    result = await session.execute(
        update(Test).where(Test.id == test_id).values(**values)
    )
    matched = result.rowcount > 0

    if matched and question_ids is not None:
        await session.execute(delete(TestQuestion).where(TestQuestion.test_id == test_id))
        if question_ids:
            await session.execute(
                insert(TestQuestion),
                [
                    {"test_id": test_id, "position": position, "question_id": qid}
                    for position, qid in enumerate(question_ids)
                ],
            )

    await session.commit()
    logger.debug(f"Обновление теста {test_id}: matched={matched}")
    return matched


async def set_test_visibility(
    session: AsyncSession, test_id: int, is_public: bool
) -> bool:
    """Изменить флаг публичности теста. Возвращает True, если тест найден."""
    return await update_test(session, test_id, {"is_public": is_public})
