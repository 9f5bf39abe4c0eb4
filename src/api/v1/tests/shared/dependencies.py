# -*- coding: utf-8 -*-
"""
Зависимости FastAPI для эндпоинтов тестов.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.clients.database_client import AsyncSessionLocal, get_db
from src.service.tests import TestService


async def get_test_service(session: AsyncSession = Depends(get_db)) -> TestService:
    """Сервис тестов, привязанный к сессии текущего запроса."""
    return TestService(session=session, session_factory=AsyncSessionLocal)
