# -*- coding: utf-8 -*-
"""
QuizService/src/config/settings.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Конфигурация настроек приложения с использованием Pydantic.

Этот модуль загружает конфигурацию из .env файла (если он есть) и переменных
окружения, предоставляя централизованную систему управления настройками.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Корень проекта (каталог с pyproject.toml)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENV_PATH = (BASE_DIR / ".env").resolve()

# В контейнере используем только переменные окружения
ENV_FILE = ENV_PATH if ENV_PATH.exists() else None


class Settings(BaseSettings):
    """Настройки приложения, загружаемые из .env файла и окружения."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Конфигурация базы данных
    database_url: str | None = None
    postgres_db: str | None = None
    postgres_user: str | None = None
    postgres_password: str | None = None
    postgres_host: str | None = None
    postgres_port: int = 5432
    database_echo: bool = False

    # Конфигурация JWT (токены выпускает внешний сервис идентификации)
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 1440

    # Конфигурация приложения
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_reload: bool = False
    auto_create_tables: bool = True

    # Конфигурация логирования
    log_level: str = "INFO"

    # Конфигурация CORS
    cors_allow_origins: str = "*"
    cors_allow_credentials: bool = True
    cors_allow_methods: str = "GET,POST,PUT,PATCH,OPTIONS"
    cors_allow_headers: str = "Authorization,Content-Type"

    # Сколько вопросов записывается параллельно при создании теста
    question_write_concurrency: int = 30

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.database_url:
            self.database_url = self._build_database_url()

    def _build_database_url(self) -> str:
        """Собирает URL базы данных из отдельных компонентов."""
        if not self.postgres_host:
            # Локальный запуск без PostgreSQL
            return f"sqlite+aiosqlite:///{BASE_DIR / 'quiz.db'}"
        driver = "postgresql+asyncpg"
        return (
            f"{driver}://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    def get_allowed_origins(self) -> list[str]:
        """Формирует список разрешённых origins для CORS."""
        if self.cors_allow_origins.strip() == "*":
            return ["*"]
        return [
            origin.strip()
            for origin in self.cors_allow_origins.split(",")
            if origin.strip()
        ]

    def get_cors_methods(self) -> list[str]:
        """Возвращает список разрешённых HTTP методов для CORS."""
        if self.cors_allow_methods == "*":
            return ["*"]
        return [
            method.strip()
            for method in self.cors_allow_methods.split(",")
            if method.strip()
        ]

    def get_cors_headers(self) -> list[str]:
        """Возвращает список разрешённых заголовков для CORS."""
        if self.cors_allow_headers == "*":
            return ["*"]
        return [
            header.strip()
            for header in self.cors_allow_headers.split(",")
            if header.strip()
        ]

    def get_config_source(self) -> str:
        """Возвращает информацию об источнике конфигурации для отладки."""
        if ENV_PATH.exists():
            return f"file: {ENV_PATH}"
        return "environment variables only"


settings = Settings()
