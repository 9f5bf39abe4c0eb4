# -*- coding: utf-8 -*-
"""
QuizService/src/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Base repository operations for generic CRUD functionality.

This module provides reusable asynchronous CRUD helpers using SQLAlchemy 2.0
async ORM, with logging. It is designed to be stateless for unit testing
simplicity.
"""

from __future__ import annotations

from typing import Any, Iterable, Type, TypeVar

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.logger import configure_logger
from src.domain.models import Base

T = TypeVar("T", bound=Base)

logger = configure_logger()

# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


async def create_item(session: AsyncSession, model: Type[T], **kwargs: Any) -> T:
    """Create a new item in the database."""
    instance = model(**kwargs)
    session.add(instance)
    await session.commit()
    await session.refresh(instance)
    logger.debug(f"Created {model.__name__} with ID {instance.id}")
    return instance


async def delete_items(
    session: AsyncSession, model: Type[T], item_ids: Iterable[int]
) -> int:
    """Delete items by ID. Returns the number of deleted rows."""
    ids = list(item_ids)
    if not ids:
        return 0
    result = await session.execute(delete(model).where(getattr(model, "id").in_(ids)))
    await session.commit()
    logger.debug(f"Deleted {result.rowcount} {model.__name__} items")
    return result.rowcount
