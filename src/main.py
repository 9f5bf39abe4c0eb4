# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения сервиса тестов.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.v1.tests import router as tests_router
from src.clients.database_client import check_connection, init_db
from src.config.logger import configure_logger
from src.config.settings import settings
from src.config.uvicorn_config import setup_uvicorn_logging
from src.utils.exceptions import APIException, api_exception_handler

logger = configure_logger()

app = FastAPI(
    title="Quiz Service API",
    description="API для управления тестами, вопросами и результатами пользователей",
    version="0.1.0",
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
)

# Настройка CORS из настроек
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.get_cors_methods(),
    allow_headers=settings.get_cors_headers(),
)

app.add_exception_handler(APIException, api_exception_handler)


# Middleware для логирования всех запросов
@app.middleware("http")
async def log_all_requests(request, call_next):
    if request.url.path.startswith("/api/"):
        logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            f"💥 Критическая ошибка API: {request.method} {request.url.path}"
        )
        raise

    if request.url.path.startswith("/api/"):
        if response.status_code >= 400:
            logger.warning(
                f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
            )
        else:
            logger.info(
                f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
            )
    return response


app.include_router(tests_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    setup_uvicorn_logging()
    logger.info("🔧 Инициализация сервисов...")

    try:
        await check_connection()
        logger.info("✅ База данных подключена")
    except Exception as e:
        logger.error(f"❌ Ошибка подключения к базе данных: {e}")
        raise

    if settings.auto_create_tables:
        await init_db()
        logger.info("✅ Таблицы созданы")

    logger.info(f"⚙️ Конфигурация: {settings.get_config_source()}")


@app.on_event("shutdown")
async def shutdown_event():
    """Обработчик завершения приложения"""
    logger.info("🛑 Завершение работы Quiz Service API")


@app.get("/api/v1")
async def api_root():
    """Корневой эндпоинт API."""
    return {"message": "Quiz Service API работает", "version": app.version}


@app.get("/api/v1/health")
async def api_health():
    """Проверка живости приложения."""
    return {"status": "ok"}
