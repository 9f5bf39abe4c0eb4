# -*- coding: utf-8 -*-
"""
Сервис для работы с тестами.

Этот модуль содержит бизнес-логику операций с тестами: список тестов,
получение теста с результатом пользователя, создание теста вместе с
вопросами, обновление теста и его публичности.

Хранилище передаётся явно: ``session`` - сессия текущего запроса,
``session_factory`` - фабрика отдельных сессий для независимых единиц работы
(параллельная запись вопросов, создание результата, откат созданных
вопросов при ошибке).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.config.logger import configure_logger
from src.config.settings import settings
from src.domain.models import Question, Result, Test
from src.repository.questions import (count_existing_questions,
                                      create_question, delete_questions,
                                      get_questions_with_words)
from src.repository.results import get_or_create_result, list_user_results
from src.repository.test import (create_test, get_test, list_tests,
                                 set_test_visibility, update_test)
from src.repository.words import count_existing_words
from src.utils.concurrency import gather_with_concurrency
from src.utils.exceptions import (BadRequestError, FieldValidationError,
                                  NotFoundError)
from src.utils.validators import (parse_id, parse_int, validate_question_ids,
                                  validate_question_specs,
                                  validate_test_fields)

logger = configure_logger(__name__)


def _parse_test_id(test_id: Any) -> int:
    parsed = parse_id(test_id)
    if parsed is None:
        raise BadRequestError("testId is invalid")
    return parsed


def _question_values(spec: Dict[str, Any]) -> Dict[str, Any]:
    """Значения колонок нового вопроса из провалидированного описания."""
    return {
        "text": str(spec["text"]) if spec.get("text") else None,
        "word_id": parse_id(spec["word"]) if spec.get("word") else None,
        "answers": list(spec["answers"]),
        "correct_answer": parse_int(spec["correctAnswer"]),
    }


class TestService:
    """Сервис операций с тестами"""

    def __init__(
        self,
        session: AsyncSession,
        session_factory: async_sessionmaker,
        question_concurrency: Optional[int] = None,
    ):
        self.session = session
        self.session_factory = session_factory
        self.question_concurrency = (
            question_concurrency or settings.question_write_concurrency
        )

    # ----------------------------- Чтение ----------------------------------

    async def list_tests(
        self, public_only: bool = False, user_id: Optional[int] = None
    ) -> Tuple[List[Test], List[Result]]:
        """
        Получить тесты и, для авторизованного пользователя, его результаты по ним.

        Args:
            public_only: Только публичные тесты
            user_id: ID пользователя или None для анонимного запроса

        Returns:
            Кортеж (тесты, результаты пользователя)
        """
        tests = await list_tests(self.session, public_only=public_only)
        results: List[Result] = []
        if user_id is not None:
            results = await list_user_results(
                self.session, user_id, [test.id for test in tests]
            )
        logger.debug(
            f"📋 Список тестов: {len(tests)} тестов, {len(results)} результатов (user={user_id})"
        )
        return tests, results

    async def get_test(
        self,
        test_id: Any,
        public_only: bool = False,
        user_id: Optional[int] = None,
    ) -> Tuple[Test, List[Question], Optional[Result]]:
        """
        Получить тест с полностью загруженными вопросами.

        Для авторизованного пользователя возвращается его результат по тесту;
        при первом просмотре создаётся пустой результат.

        Raises:
            BadRequestError: Некорректный ID теста
            NotFoundError: Тест не найден (или не публичный при public_only)
        """
        parsed_id = _parse_test_id(test_id)

        test = await get_test(self.session, parsed_id, public_only=public_only)
        if test is None:
            raise NotFoundError("Test", parsed_id)

        questions = await get_questions_with_words(self.session, test.question_ids)

        result = None
        if user_id is not None:
            async with self.session_factory() as session:
                result = await get_or_create_result(session, user_id, test.id)

        return test, questions, result

    # ----------------------------- Запись ----------------------------------

    async def create_test(
        self, payload: Dict[str, Any]
    ) -> Tuple[Test, List[Question]]:
        """
        Создать тест вместе с новыми вопросами.

        Вопросы записываются параллельно (не более ``question_concurrency``
        одновременно), ссылки на них сохраняют порядок из запроса. Если запись
        вопроса или теста не удалась, уже созданные вопросы удаляются.

        Raises:
            FieldValidationError: Ошибки валидации по полям
        """
        errors: Dict[str, str] = {}
        validate_test_fields(payload, errors)
        validate_question_specs(payload.get("questions"), errors)
        if "questions" not in errors:
            word_ids = [
                parse_id(spec["word"]) for spec in payload["questions"] if spec.get("word")
            ]
            found = await count_existing_words(self.session, word_ids)
            if found != len(set(word_ids)):
                errors["questions"] = "word is invalid"
        if errors:
            logger.info(f"Тест не создан, ошибки валидации: {errors}")
            raise FieldValidationError(errors)

        specs = [_question_values(spec) for spec in payload["questions"]]
        outcomes = await gather_with_concurrency(
            self.question_concurrency,
            specs,
            self._write_question,
            return_exceptions=True,
        )
        created = [item for item in outcomes if isinstance(item, Question)]
        failures = [item for item in outcomes if isinstance(item, BaseException)]
        if failures:
            logger.error(
                f"❌ Не удалось записать {len(failures)} из {len(specs)} вопросов"
            )
            await self._discard_questions(created)
            raise failures[0]

        try:
            test = await create_test(
                self.session,
                title=payload["title"],
                description=payload["description"],
                image=payload.get("image") or None,
                question_ids=[question.id for question in created],
            )
        except Exception:
            await self.session.rollback()
            await self._discard_questions(created)
            raise

        questions = await get_questions_with_words(self.session, test.question_ids)
        return test, questions

    async def update_test(self, test_id: Any, payload: Dict[str, Any]) -> bool:
        """
        Перезаписать название, описание, картинку и список вопросов теста.

        Returns:
            True, если тест с таким ID существовал

        Raises:
            BadRequestError: Некорректный ID теста
            FieldValidationError: Ошибки валидации по полям
        """
        parsed_id = _parse_test_id(test_id)

        errors: Dict[str, str] = {}
        validate_test_fields(payload, errors)
        question_ids = validate_question_ids(payload.get("questions"), errors)
        if "questions" not in errors:
            found = await count_existing_questions(self.session, question_ids)
            if found != len(set(question_ids)):
                errors["questions"] = "some questions cannot be found"
        if errors:
            logger.info(f"Тест {parsed_id} не обновлён, ошибки валидации: {errors}")
            raise FieldValidationError(errors)

        values: Dict[str, Any] = {
            "title": payload["title"],
            "description": payload["description"],
        }
        if "image" in payload:
            values["image"] = payload["image"] or None

        matched = await update_test(self.session, parsed_id, values, question_ids)
        if not matched:
            logger.info(f"Тест {parsed_id} для обновления не найден")
        return matched

    async def update_visibility(self, test_id: Any, payload: Dict[str, Any]) -> bool:
        """
        Изменить флаг публичности теста.

        Raises:
            BadRequestError: Некорректный ID теста
            FieldValidationError: ``isPublic`` не булево значение
        """
        parsed_id = _parse_test_id(test_id)
        is_public = payload.get("is_public")
        if not isinstance(is_public, bool):
            raise FieldValidationError({"isPublic": "isPublic must be boolean"})

        matched = await set_test_visibility(self.session, parsed_id, is_public)
        logger.info(f"Тест {parsed_id}: is_public={is_public} (matched={matched})")
        return matched

    # ----------------------------- Помощники -------------------------------

    async def _write_question(self, values: Dict[str, Any]) -> Question:
        async with self.session_factory() as session:
            return await create_question(session, **values)

    async def _discard_questions(self, questions: List[Question]) -> None:
        """Удаляет вопросы, созданные неудавшейся операцией создания теста."""
        if not questions:
            return
        ids = [question.id for question in questions]
        try:
            async with self.session_factory() as session:
                await delete_questions(session, ids)
            logger.warning(f"🧹 Удалены вопросы неудавшегося создания теста: {ids}")
        except Exception:
            logger.exception(f"Не удалось удалить вопросы {ids} после ошибки")
