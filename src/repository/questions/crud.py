# -*- coding: utf-8 -*-
"""
QuizService/src/repository/questions/crud.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для работы с вопросами.
"""

from typing import Any, Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.config.logger import configure_logger
from src.domain.models import Question
from src.repository.base import create_item, delete_items

logger = configure_logger()


async def create_question(
    session: AsyncSession,
    answers: List[Any],
    correct_answer: int,
    text: Optional[str] = None,
    word_id: Optional[int] = None,
) -> Question:
    """Создать новый вопрос."""
    logger.debug(f"Создание вопроса: text={text!r}, word_id={word_id}")
    return await create_item(
        session,
        Question,
        text=text,
        word_id=word_id,
        answers=answers,
        correct_answer=correct_answer,
    )


async def count_existing_questions(
    session: AsyncSession, question_ids: Iterable[int]
) -> int:
    """Количество существующих вопросов среди переданных ID (повторы не учитываются)."""
    unique_ids = set(question_ids)
    if not unique_ids:
        return 0
    stmt = (
        select(func.count())
        .select_from(Question)
        .where(Question.id.in_(unique_ids))
    )
    result = await session.execute(stmt)
    return result.scalar_one()


async def get_questions_with_words(
    session: AsyncSession, question_ids: Iterable[int]
) -> List[Question]:
    """
    Получить вопросы вместе со связанными словами в порядке ``question_ids``.

    Повторяющиеся ID дают повторяющиеся вопросы; отсутствующие пропускаются.
    """
    ordered_ids = list(question_ids)
    if not ordered_ids:
        return []
    stmt = (
        select(Question)
        .where(Question.id.in_(set(ordered_ids)))
        .options(selectinload(Question.word))
    )
    result = await session.execute(stmt)
    by_id = {question.id: question for question in result.scalars().all()}
    return [by_id[qid] for qid in ordered_ids if qid in by_id]


async def delete_questions(session: AsyncSession, question_ids: Iterable[int]) -> int:
    """Удалить вопросы по ID."""
    return await delete_items(session, Question, question_ids)
