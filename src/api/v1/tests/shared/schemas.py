# -*- coding: utf-8 -*-
"""
Shared Pydantic schemas for tests.

Поля в JSON передаются в camelCase (``isPublic``, ``correctAnswer``),
в Python - в snake_case.

Схемы запросов намеренно принимают любые значения полей: правила проверяются
сервисом, который собирает ошибки по всем полям сразу и отвечает 400.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# ----------------------------- REQUESTS -------------------------------------


class TestCreateSchema(CamelModel):
    title: Any = None
    description: Any = None
    image: Any = None
    questions: Any = Field(
        default=None,
        description="Новые вопросы: [{text?, word?, answers, correctAnswer}]",
    )


class TestUpdateSchema(CamelModel):
    title: Any = None
    description: Any = None
    image: Any = None
    questions: Any = Field(default=None, description="ID существующих вопросов")


class TestVisibilitySchema(CamelModel):
    is_public: Any = None


# ----------------------------- RESPONSES ------------------------------------


class WordReadSchema(CamelModel):
    id: int
    word: str
    meaning: Optional[str] = None


class QuestionKeySchema(CamelModel):
    """Вопрос в списке тестов: только ID и верный ответ."""

    id: int
    correct_answer: int


class QuestionReadSchema(CamelModel):
    id: int
    text: Optional[str] = None
    word: Optional[WordReadSchema] = None
    answers: List[Any]
    correct_answer: int


class TestBaseReadSchema(CamelModel):
    id: int
    title: str
    description: str
    image: Optional[str] = None
    is_public: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class TestSummarySchema(TestBaseReadSchema):
    questions: List[QuestionKeySchema]


class TestDetailSchema(TestBaseReadSchema):
    questions: List[QuestionReadSchema]


class ResultReadSchema(CamelModel):
    id: int
    user_id: int
    test_id: int
    answers: Dict[str, Any] = Field(default_factory=dict)
    score: int = 0
    is_completed: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None


class TestListResponse(CamelModel):
    tests: List[TestSummarySchema]
    results: Dict[str, ResultReadSchema]


class TestWithResultResponse(CamelModel):
    test: TestDetailSchema
    result: Union[ResultReadSchema, Dict[str, Any]]


class SuccessResponse(CamelModel):
    is_success: bool = True
