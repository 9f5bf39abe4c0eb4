# -*- coding: utf-8 -*-
"""security
~~~~~~~~~~~
JWT помощники и извлечение текущего пользователя из запроса.

Ключевые моменты
================
* Использует *python‑jose* для компактной обработки JWS.
* Токены выпускает внешний сервис идентификации с тем же секретом;
  здесь они только проверяются. ``create_access_token`` нужен для
  служебных скриптов и тестов.
* Пользователь необязателен: запрос без заголовка ``Authorization``
  считается анонимным, а неверный токен даёт 401.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fastapi import HTTPException, Request, status
from jose import JWTError, jwt

from src.config.logger import configure_logger
from src.config.settings import settings

logger = configure_logger()

# ---------------------------------------------------------------------------
# JWT помощники
# ---------------------------------------------------------------------------


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta
        if expires_delta is not None
        else timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire, "token_type": "access"})
    if "sub" in to_encode and not isinstance(to_encode["sub"], str):
        to_encode["sub"] = str(to_encode["sub"])
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> dict:
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError as exc:
        logger.warning(f"Ошибка проверки JWT: {str(exc)}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Недействительный или истекший токен",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc

    if payload.get("token_type") != "access" or payload.get("sub") is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Неверный payload токена",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload


# ---------------------------------------------------------------------------
# Текущий пользователь
# ---------------------------------------------------------------------------


def get_optional_user(request: Request) -> dict | None:
    """
    Получить пользователя из bearer токена, если он передан.

    Returns:
        Payload токена или None для анонимного запроса
    """
    authorization = request.headers.get("Authorization")
    if not authorization:
        return None
    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Ожидается bearer токен",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return verify_token(authorization.split(" ", 1)[1])


def get_user_id(user: dict | None) -> int | None:
    """ID пользователя из payload токена (claim ``sub``)."""
    if user is None:
        return None
    try:
        return int(user["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Неверный payload токена",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
