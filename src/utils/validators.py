# -*- coding: utf-8 -*-
"""
Валидация входных данных для операций с тестами.

Функции собирают ошибки в общий словарь ``поле -> сообщение``; для одного
поля сохраняется последнее сообщение.
"""

import re
from typing import Any, Dict, List, Optional

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_ID_RE = re.compile(r"^[1-9][0-9]*$")
_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_URL_ADAPTER = TypeAdapter(HttpUrl)

MIN_TEXT_LENGTH = 3
_TRUE_FLAGS = {"true", "1", "yes", "on"}


def parse_id(value: Any) -> Optional[int]:
    """Возвращает ID как int, либо None, если значение не является допустимым ID."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and _ID_RE.match(value):
        return int(value)
    return None


def is_valid_id(value: Any) -> bool:
    return parse_id(value) is not None


def parse_int(value: Any) -> Optional[int]:
    """Целое число, целочисленный float или строка из цифр. bool не принимается."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _INT_RE.match(value.strip()):
        return int(value.strip())
    return None


def parse_flag(value: Optional[str]) -> bool:
    """Флаг из query-параметра: только явные "true/1/yes/on" дают True."""
    return value is not None and value.strip().lower() in _TRUE_FLAGS


def is_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def _is_long_enough(value: Any) -> bool:
    return isinstance(value, str) and len(value) >= MIN_TEXT_LENGTH


def validate_test_fields(data: Dict[str, Any], errors: Dict[str, str]) -> None:
    """Проверяет title, description и image."""
    if not _is_long_enough(data.get("title")):
        errors["title"] = "title is invalid"
    if not _is_long_enough(data.get("description")):
        errors["description"] = "description is invalid"
    image = data.get("image")
    if image and not is_url(image):
        errors["image"] = "image is not URL"


def _question_spec_error(spec: Any) -> Optional[str]:
    if not isinstance(spec, dict) or (not spec.get("text") and not spec.get("word")):
        return "question is required word or text"
    if spec.get("word") and not is_valid_id(spec["word"]):
        return "word is invalid"
    answers = spec.get("answers")
    if not isinstance(answers, list):
        return "answers is invalid"
    correct_answer = parse_int(spec.get("correctAnswer"))
    if correct_answer is None:
        return "correctAnswer must be integer"
    if not 0 <= correct_answer < len(answers):
        return "correctAnswer is out of range"
    return None


def validate_question_specs(questions: Any, errors: Dict[str, str]) -> None:
    """Проверяет описания новых вопросов для создания теста."""
    if not isinstance(questions, list):
        errors["questions"] = "questions is not array"
        return
    for spec in questions:
        message = _question_spec_error(spec)
        if message:
            errors["questions"] = message


def validate_question_ids(questions: Any, errors: Dict[str, str]) -> List[int]:
    """
    Проверяет список ID существующих вопросов (только формат).

    Returns:
        Разобранные ID в исходном порядке. Если хотя бы один ID некорректен,
        ошибка записывается в ``errors``.
    """
    if not isinstance(questions, list):
        errors["questions"] = "questions is not array"
        return []
    ids = [parse_id(value) for value in questions]
    if any(question_id is None for question_id in ids):
        errors["questions"] = "some questions cannot be found"
        return []
    return ids
