# -*- coding: utf-8 -*-
"""
Shared utilities for tests.

Преобразование моделей БД в безопасные для клиента схемы ответа.
"""

from typing import Iterable, List

from src.domain.models import Question, Result, Test

from .schemas import (QuestionKeySchema, QuestionReadSchema, ResultReadSchema,
                      TestDetailSchema, TestSummarySchema, WordReadSchema)


def _test_fields(test: Test) -> dict:
    return {
        "id": test.id,
        "title": test.title,
        "description": test.description,
        "image": test.image,
        "is_public": test.is_public,
        "created_at": test.created_at,
        "updated_at": test.updated_at,
    }


def format_question(question: Question) -> QuestionReadSchema:
    """Вопрос со словом (слово должно быть загружено заранее)."""
    return QuestionReadSchema(
        id=question.id,
        text=question.text,
        word=WordReadSchema.model_validate(question.word) if question.word else None,
        answers=list(question.answers or []),
        correct_answer=question.correct_answer,
    )


def format_test_summary(test: Test) -> TestSummarySchema:
    """
    Тест для списка: у вопросов только ID и верный ответ.

    Ожидает, что ссылки на вопросы загружены вместе с вопросами.
    """
    return TestSummarySchema(
        **_test_fields(test),
        questions=[
            QuestionKeySchema(
                id=link.question.id, correct_answer=link.question.correct_answer
            )
            for link in test.question_links
            if link.question is not None
        ],
    )


def format_test_detail(test: Test, questions: Iterable[Question]) -> TestDetailSchema:
    """Тест с полными вопросами в переданном порядке."""
    return TestDetailSchema(
        **_test_fields(test),
        questions=[format_question(question) for question in questions],
    )


def format_result(result: Result) -> ResultReadSchema:
    return ResultReadSchema.model_validate(result)


def format_results(results: Iterable[Result]) -> dict:
    """Словарь ``ID результата -> результат``."""
    return {str(result.id): format_result(result) for result in results}


def format_tests_summary(tests: Iterable[Test]) -> List[TestSummarySchema]:
    return [format_test_summary(test) for test in tests]
