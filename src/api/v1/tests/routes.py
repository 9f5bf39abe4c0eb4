# -*- coding: utf-8 -*-
"""
Роутер для работы с тестами.

Этот модуль объединяет эндпоинты чтения, создания и обновления тестов.
"""

from fastapi import APIRouter

from .crud import create as crud_create
from .crud import read as crud_read
from .crud import update as crud_update

router = APIRouter()

router.include_router(crud_read.router, prefix="/tests", tags=["🧪 Тесты - 📖 Чтение"])

router.include_router(
    crud_create.router, prefix="/tests", tags=["🧪 Тесты - ➕ Создание"]
)

router.include_router(
    crud_update.router, prefix="/tests", tags=["🧪 Тесты - ✏️ Обновление"]
)
