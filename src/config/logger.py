# -*- coding: utf-8 -*-
"""
Настройка логирования для сервиса тестов с использованием loguru.
"""
import logging
import sys

from loguru import logger

from src.config.settings import settings

# Удаляем стандартный хендлер loguru
logger.remove()

# Шумные библиотеки, чьи INFO-логи не нужны
_MUTED_PREFIXES = ("httpx", "httpcore", "aiosqlite", "asyncio")


class InterceptHandler(logging.Handler):
    """Перехватывает стандартные логи и перенаправляет их в loguru."""

    def emit(self, record):
        if record.name.startswith(_MUTED_PREFIXES) and record.levelno < logging.WARNING:
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


# Настраиваем перехват всех стандартных логов
logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

log_level = settings.log_level.upper()

console_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

logger.add(
    sys.stdout,
    format=console_format,
    level=log_level,
    colorize=True,
    backtrace=False,
    diagnose=False,
)


def configure_logger(name: str = "quiz_service"):
    """
    Возвращает общий логгер приложения.

    Args:
        name: Имя логгера (игнорируется в loguru, оставлено для совместимости)

    Returns:
        loguru.Logger: Настроенный логгер
    """
    return logger
