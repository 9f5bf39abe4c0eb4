# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных (PostgreSQL через asyncpg, SQLite через aiosqlite).
"""
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)

from src.config.settings import settings
from src.domain.models import Base

_engine_options = {"echo": settings.database_echo}
if settings.database_url.startswith("postgresql"):
    _engine_options.update(
        pool_pre_ping=True,  # Проверяем соединение перед использованием
        pool_recycle=3600,  # Переподключаемся каждый час
    )

# Создаем асинхронный движок для асинхронных операций
async_engine = create_async_engine(settings.database_url, **_engine_options)

# Создаем фабрику асинхронных сессий
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Предоставляет асинхронную сессию базы данных для внедрения зависимостей в FastAPI.

    Yields:
        AsyncSession: Активная сессия базы данных
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def check_connection() -> None:
    """Выполняет ``SELECT 1``, чтобы убедиться, что база доступна."""
    async with async_engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def init_db() -> None:
    """
    Создаёт все таблицы, описанные в моделях (если их ещё нет).

    Raises:
        SQLAlchemyError: Ошибки при создании таблиц
    """
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
