"""
Программа: «Uploads» – веб-приложение для загрузки файлов в объектное хранилище.
Модуль: config.py – конфигурация приложения.

Назначение модуля:
- Определение базовых параметров приложения Flask (секретный ключ, строка подключения к БД).
- Настройка подключения к бакету S3 (регион, ключи доступа, endpoint).
- Параметры языка интерфейса, CORS и журналирования.
"""

import os
import warnings


def _get_env_bool(name: str, default: bool = False) -> bool:
    """Преобразует переменную окружения в bool."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_int(name: str, default: int) -> int:
    """Преобразует переменную окружения в int."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str] | None = None) -> list[str]:
    """Преобразует переменную окружения вида 'a,b,c' в список."""
    value = os.environ.get(name)
    if value is None:
        return list(default or [])
    return [item.strip() for item in value.split(",") if item.strip()]


def _get_env_str(name: str) -> str | None:
    """Возвращает непустое значение переменной окружения или None."""
    value = (os.environ.get(name) or "").strip()
    return value or None


def _is_production() -> bool:
    """Определяет production-режим по FLASK_ENV."""
    return os.environ.get("FLASK_ENV", "").strip().lower() == "production"


class Config:
    """Базовая конфигурация приложения."""

    _PRODUCTION = _is_production()

    SECRET_KEY = os.environ.get("SECRET_KEY")
    if not SECRET_KEY:
        if _PRODUCTION:
            raise RuntimeError(
                "SECRET_KEY environment variable is required in production. "
                "Set a strong random value before starting the app."
            )
        SECRET_KEY = "dev-insecure-secret-key"
        warnings.warn(
            "SECRET_KEY is not set. Using insecure development fallback key.",
            RuntimeWarning,
            stacklevel=1,
        )

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///uploads.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SESSION_COOKIE_SECURE = _get_env_bool("SESSION_COOKIE_SECURE", default=_PRODUCTION)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.environ.get("SESSION_COOKIE_SAMESITE", "Lax")

    MAX_CONTENT_LENGTH = _get_env_int("MAX_CONTENT_LENGTH", 100 * 1024 * 1024)

    S3_BUCKET = _get_env_str("S3_BUCKET")
    if not S3_BUCKET:
        if _PRODUCTION:
            raise RuntimeError("S3_BUCKET environment variable is required in production.")
        S3_BUCKET = "uploads-dev"
    AWS_REGION = _get_env_str("AWS_REGION") or "us-east-1"
    # Пустые ключи означают стандартную цепочку учётных данных boto3
    AWS_ACCESS_KEY_ID = _get_env_str("AWS_ACCESS_KEY_ID")
    AWS_SECRET_ACCESS_KEY = _get_env_str("AWS_SECRET_ACCESS_KEY")
    S3_ENDPOINT_URL = _get_env_str("S3_ENDPOINT_URL")
    S3_PUBLIC_URL = _get_env_str("S3_PUBLIC_URL")

    CORS_ENABLED = _get_env_bool("CORS_ENABLED", default=False)
    CORS_ORIGINS = _get_env_list(
        "CORS_ORIGINS",
        default=[
            "http://127.0.0.1:5000",
            "http://localhost:5000",
        ],
    )

    SUPPORTED_LANGUAGES = ("en", "ru")
    DEFAULT_LANGUAGE = os.environ.get("DEFAULT_LANGUAGE", "en").strip().lower() or "en"
    LANG_COOKIE_NAME = os.environ.get("LANG_COOKIE_NAME", "site_lang").strip() or "site_lang"
    LANG_COOKIE_MAX_AGE = _get_env_int("LANG_COOKIE_MAX_AGE", 31536000)

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
