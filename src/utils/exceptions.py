# -*- coding: utf-8 -*-
"""
Этот модуль определяет пользовательские исключения для API сервиса тестов.
Эти исключения используются для обработки общих сценариев ошибок с соответствующими HTTP статус-кодами и сообщениями.
"""

from enum import Enum
from typing import Dict, Union

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse


class ErrorCode(str, Enum):
    """Перечисление для уникальных кодов ошибок."""

    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class APIException(HTTPException):
    """Базовый класс для пользовательских исключений API."""

    def __init__(
        self,
        status_code: int,
        detail: Union[str, Dict[str, str]],
        error_code: str,
        headers: dict | None = None,
    ):
        """
        Инициализирует APIException с кодом статуса, деталями и кодом ошибки.

        Args:
            status_code (int): HTTP код статуса.
            detail (str | dict): Сообщение об ошибке или словарь "поле -> сообщение".
            error_code (str): Уникальный код ошибки.
            headers (dict, optional): Дополнительные заголовки.
        """
        super().__init__(status_code=status_code, headers=headers)
        self.detail = detail
        self.error_code = error_code


class BadRequestError(APIException):
    """Вызывается, когда запрос некорректен (например, неверный ID)."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=ErrorCode.BAD_REQUEST,
        )


class FieldValidationError(APIException):
    """Вызывается, когда одно или несколько полей тела запроса недействительны."""

    def __init__(self, errors: Dict[str, str]):
        """
        Инициализирует FieldValidationError.

        Args:
            errors (dict): Сообщения об ошибках по именам полей.
        """
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=dict(errors),
            error_code=ErrorCode.VALIDATION_ERROR,
        )
        self.errors = dict(errors)


class NotFoundError(APIException):
    """Вызывается, когда ресурс не найден."""

    def __init__(self, resource_type: str, resource_id: str | int | None = None):
        """
        Инициализирует NotFoundError.

        Args:
            resource_type (str): Тип ресурса (например, "Test").
            resource_id (str or int, optional): ID ресурса (только для логов).
        """
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource_type} not found",
            error_code=ErrorCode.NOT_FOUND,
        )
        self.resource_id = resource_id


class InternalServerError(APIException):
    """Ошибка хранилища или инфраструктуры. Детали не раскрываются клиенту."""

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code=ErrorCode.INTERNAL_ERROR,
        )


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Отдаёт словарь ошибок как есть, а строковое сообщение - как ``{"error": ...}``."""
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)
