# -*- coding: utf-8 -*-
"""
Фикстуры для тестирования тестов, вопросов и результатов
"""

from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models import Question, Result, Test, TestQuestion, Word
from src.repository.base import create_item


async def create_test_word(
    session: AsyncSession, word: str = "apple", meaning: str = "яблоко"
) -> Word:
    """Создать тестовое слово"""
    return await create_item(session, Word, word=word, meaning=meaning)


async def create_test_question(
    session: AsyncSession,
    text: Optional[str] = "2+2?",
    word_id: Optional[int] = None,
    answers: Optional[list] = None,
    correct_answer: int = 1,
) -> Question:
    """Создать тестовый вопрос"""
    return await create_item(
        session,
        Question,
        text=text,
        word_id=word_id,
        answers=answers if answers is not None else ["3", "4"],
        correct_answer=correct_answer,
    )


async def create_test_questions(
    session: AsyncSession, count: int = 3
) -> List[Question]:
    """Создать тестовые вопросы"""
    questions = []
    for i in range(count):
        question = await create_test_question(
            session,
            text=f"Question {i + 1}?",
            answers=[f"Answer {i + 1}.{j}" for j in range(3)],
            correct_answer=i % 3,
        )
        questions.append(question)
    return questions


async def create_test_test(
    session: AsyncSession,
    title: str = "Test",
    question_ids: Sequence[int] = (),
    is_public: bool = False,
    description: str = "Test description",
    image: Optional[str] = None,
) -> Test:
    """Создать тестовый тест со ссылками на вопросы"""
    test = Test(
        title=title,
        description=description,
        image=image,
        is_public=is_public,
        question_links=[
            TestQuestion(position=position, question_id=question_id)
            for position, question_id in enumerate(question_ids)
        ],
    )
    session.add(test)
    await session.commit()
    return test


async def create_test_result(
    session: AsyncSession, user_id: int, test_id: int, score: int = 0
) -> Result:
    """Создать тестовый результат"""
    return await create_item(
        session,
        Result,
        user_id=user_id,
        test_id=test_id,
        answers={},
        score=score,
        is_completed=False,
    )


async def count_rows(session: AsyncSession, model) -> int:
    """Количество строк в таблице модели"""
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()
