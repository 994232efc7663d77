# -*- coding: utf-8 -*-
"""
reprova/config/settings.py
~~~~~~~~~~~~~~~~~~~~~~~~~~
Конфигурация настроек приложения с использованием Pydantic.

Настройки загружаются из переменных окружения и, если он существует, из
.env файла в корне проекта.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Корень проекта (каталог с pyproject.toml)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENV_PATH = (BASE_DIR / ".env").resolve()


class Settings(BaseSettings):
    """Настройки приложения, загружаемые из окружения и .env файла."""

    model_config = SettingsConfigDict(
        env_file=ENV_PATH if ENV_PATH.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Конфигурация базы данных
    database_url: str = "sqlite+aiosqlite:///./reprova.db"
    database_echo: bool = False

    # Общий секрет для авторизации запросов
    reprova_token: str | None = None

    # Конфигурация приложения
    app_host: str = "0.0.0.0"
    app_port: int = 8080

    # Конфигурация логирования
    log_level: str = "INFO"
    log_file: str | None = None

    # Конфигурация CORS
    cors_allow_origins: str = "*"
    cors_allow_credentials: bool = False
    cors_allow_methods: str = "GET,POST,DELETE,OPTIONS"
    cors_allow_headers: str = "Content-Type"

    def get_allowed_origins(self) -> list[str]:
        """Формирует список разрешённых origins для CORS."""
        return _split_csv(self.cors_allow_origins) or ["*"]

    def get_cors_methods(self) -> list[str]:
        """Возвращает список разрешённых HTTP методов для CORS."""
        if self.cors_allow_methods == "*":
            return ["*"]
        return _split_csv(self.cors_allow_methods)

    def get_cors_headers(self) -> list[str]:
        """Возвращает список разрешённых заголовков для CORS."""
        if self.cors_allow_headers == "*":
            return ["*"]
        return _split_csv(self.cors_allow_headers)

    def get_config_source(self) -> str:
        """Возвращает информацию об источнике конфигурации для отладки."""
        if ENV_PATH.exists():
            return f"env file: {ENV_PATH}"
        return "environment variables only"


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


settings = Settings()
