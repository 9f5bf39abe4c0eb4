# -*- coding: utf-8 -*-
"""
Помощники для ограниченного параллелизма asyncio.
"""

import asyncio
from typing import Awaitable, Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def gather_with_concurrency(
    limit: int,
    items: Iterable[T],
    func: Callable[[T], Awaitable[R]],
    return_exceptions: bool = False,
) -> List[R]:
    """
    Выполняет ``func`` для каждого элемента, не более ``limit`` одновременно.

    Результаты возвращаются в порядке ``items``, независимо от порядка
    завершения. С ``return_exceptions=True`` исключения попадают в список
    результатов вместо того, чтобы прерывать ожидание.
    """
    if limit < 1:
        raise ValueError("limit must be >= 1")

    semaphore = asyncio.Semaphore(limit)

    async def run(item: T) -> R:
        async with semaphore:
            return await func(item)

    return await asyncio.gather(
        *(run(item) for item in items), return_exceptions=return_exceptions
    )
