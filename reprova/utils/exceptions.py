# -*- coding: utf-8 -*-
"""
Этот модуль определяет пользовательские исключения для API Reprova.

Каждое исключение несет HTTP статус-код и фиксированное тело ответа, которое
ресурс отдает клиенту без изменений.
"""

from enum import Enum
from typing import Any, Dict

from fastapi import HTTPException, status


class ErrorCode(str, Enum):
    """Перечисление для уникальных кодов ошибок."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"


# Фиксированные тела ответов API
OK_BODY: Dict[str, Any] = {"status": "ok"}
INVALID_BODY: Dict[str, Any] = {"status": "invalid"}
UNAUTHORIZED_BODY: Dict[str, Any] = {"status": "unauthorized"}


class APIException(HTTPException):
    """Базовый класс для пользовательских исключений API."""

    body: Dict[str, Any] = INVALID_BODY

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: str,
        headers: dict | None = None,
    ):
        """
        Инициализирует APIException с кодом статуса, деталями и кодом ошибки.

        Args:
            status_code (int): HTTP код статуса.
            detail (str): Сообщение об ошибке (только для логов).
            error_code (str): Уникальный код ошибки.
            headers (dict, optional): Дополнительные заголовки.
        """
        super().__init__(status_code=status_code, headers=headers)
        self.detail = detail
        self.error_code = error_code


class InvalidRequestError(APIException):
    """Вызывается, когда запрос некорректен: нет параметра, плохое тело, неизвестный ID."""

    body = INVALID_BODY

    def __init__(self, detail: str = "Некорректный запрос"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=ErrorCode.INVALID_REQUEST,
        )


class UnauthorizedError(APIException):
    """Вызывается, когда токен отсутствует или неверен, либо вопрос приватный."""

    body = UNAUTHORIZED_BODY

    def __init__(self, detail: str = "Недостаточно прав"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            error_code=ErrorCode.UNAUTHORIZED,
        )


class SerializationError(ValueError):
    """Вызывается, когда JSON не удается разобрать в ожидаемую структуру."""

    error_code = ErrorCode.SERIALIZATION_ERROR
