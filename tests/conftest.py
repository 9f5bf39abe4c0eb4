# -*- coding: utf-8 -*-
"""
Общие фикстуры для тестирования
"""

import os

# Настройки читаются при импорте src, поэтому окружение задаём заранее
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,  # noqa: E402
                                    create_async_engine)

from src.api.v1.tests.shared.dependencies import get_test_service  # noqa: E402
from src.domain.models import Base  # noqa: E402
from src.main import app  # noqa: E402
from src.security.security import create_access_token  # noqa: E402
from src.service.tests import TestService  # noqa: E402


@pytest.fixture
async def test_engine(tmp_path):
    """Создать тестовый движок БД.

    База в файле, а не в памяти: параллельные сессии сервиса работают
    через отдельные соединения и должны видеть одни и те же данные.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False
    )

    # Создаем таблицы
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    """Фабрика сессий тестовой БД."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    """Создать тестовую сессию БД."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def test_service(session_factory):
    """Сервис тестов со своей сессией, как в запросе к API."""
    async with session_factory() as session:
        yield TestService(session, session_factory, question_concurrency=5)


@pytest.fixture
async def async_client(session_factory):
    """Создать асинхронный тестовый клиент для API."""

    async def override_get_test_service():
        async with session_factory() as session:
            yield TestService(session, session_factory)

    app.dependency_overrides[get_test_service] = override_get_test_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Заголовки авторизации для пользователя с указанным ID."""

    def make(user_id: int = 1) -> dict:
        token = create_access_token({"sub": user_id})
        return {"Authorization": f"Bearer {token}"}

    return make
