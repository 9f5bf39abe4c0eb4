#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Скрипт инициализации базы данных.

Выполняет:
1. Проверку подключения к базе
2. Применение миграций
"""

import asyncio
import subprocess
import sys
from pathlib import Path

# Добавляем корень проекта в sys.path
sys.path.append(str(Path(__file__).parent.parent))

from src.clients.database_client import check_connection  # noqa: E402
from src.config.logger import configure_logger  # noqa: E402

logger = configure_logger()


async def init_database():
    """Проверка подключения и применение миграций."""
    try:
        print("🚀 Начинаем инициализацию базы данных...")

        print("🔌 Проверка подключения...")
        await check_connection()
        print("✅ База данных доступна")

        print("🔄 Применение миграций...")
        result = subprocess.run(
            ["alembic", "-c", "alembic.ini", "upgrade", "head"],
            capture_output=True,
            text=True,
            cwd=Path(__file__).parent.parent,
        )

        if result.returncode != 0:
            print(f"❌ Ошибка при применении миграций: {result.stderr}")
            print(f"stdout: {result.stdout}")
            sys.exit(1)

        print("🎉 Инициализация базы данных завершена успешно!")

    except Exception as e:
        logger.error(f"Ошибка при инициализации базы данных: {e}")
        print(f"❌ Ошибка: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(init_database())
