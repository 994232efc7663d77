# -*- coding: utf-8 -*-
"""
reprova/api/v1/questions/shared/commands.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Проверка формы запроса до запуска обработчика.

Каждый построитель превращает параметры запроса в типизированную команду или
бросает ``UnauthorizedError`` / ``InvalidRequestError``. Для закрытых операций
токен проверяется раньше любых других параметров.
"""

from typing import Mapping, Optional, Union

from pydantic import BaseModel

from reprova.config.logger import configure_logger
from reprova.domain.question import Question
from reprova.security.security import Authorizer
from reprova.utils.exceptions import InvalidRequestError, UnauthorizedError
from reprova.utils.json_serializer import JsonSerializer

logger = configure_logger("commands")

ID_PARAM = "id"
TOKEN_PARAM = "token"


class ListQuestionsCommand(BaseModel):
    """Получить все вопросы, видимые вызывающему."""

    authorized: bool

    class Config:
        frozen = True


class GetQuestionCommand(BaseModel):
    """Получить один вопрос."""

    id: str
    authorized: bool

    class Config:
        frozen = True


class GetStatisticsCommand(GetQuestionCommand):
    """Получить статистику вопроса."""


class SaveQuestionCommand(BaseModel):
    """Создать вопрос (без id) или заменить существующий (с id)."""

    question: Question


class DeleteQuestionCommand(BaseModel):
    """Удалить один вопрос."""

    id: str

    class Config:
        frozen = True


class DeleteAllQuestionsCommand(BaseModel):
    """Удалить все вопросы."""

    class Config:
        frozen = True


def _param(params: Mapping[str, str], name: str) -> Optional[str]:
    value = params.get(name)
    if value is None or not value.strip():
        return None
    return value


def _require_token(params: Mapping[str, str], authorizer: Authorizer) -> None:
    token = params.get(TOKEN_PARAM)
    if not authorizer.is_authorized(token):
        raise UnauthorizedError(f"Неверный токен: {token}")


def _require_id(params: Mapping[str, str]) -> str:
    question_id = _param(params, ID_PARAM)
    if question_id is None:
        raise InvalidRequestError("Не указан параметр id")
    return question_id


def parse_read(
    params: Mapping[str, str], authorizer: Authorizer
) -> Union[ListQuestionsCommand, GetQuestionCommand]:
    """Без id - список вопросов, с id - один вопрос."""
    authorized = authorizer.is_authorized(params.get(TOKEN_PARAM))
    question_id = _param(params, ID_PARAM)
    if question_id is None:
        return ListQuestionsCommand(authorized=authorized)
    return GetQuestionCommand(id=question_id, authorized=authorized)


def parse_statistics(
    params: Mapping[str, str], authorizer: Authorizer
) -> GetStatisticsCommand:
    authorized = authorizer.is_authorized(params.get(TOKEN_PARAM))
    return GetStatisticsCommand(id=_require_id(params), authorized=authorized)


def parse_save(
    params: Mapping[str, str],
    body: Union[str, bytes],
    authorizer: Authorizer,
    serializer: JsonSerializer,
) -> SaveQuestionCommand:
    """
    Разобрать тело запроса в вопрос.

    Любая ошибка разбора превращается в ``InvalidRequestError``: обработчик
    не должен падать из-за тела запроса.
    """
    _require_token(params, authorizer)
    try:
        question = serializer.parse(body, Question)
    except Exception as e:
        logger.opt(exception=e).error("Некорректное тело запроса")
        raise InvalidRequestError(f"Некорректное тело запроса: {e}") from e
    return SaveQuestionCommand(question=question)


def parse_delete(
    params: Mapping[str, str], authorizer: Authorizer
) -> DeleteQuestionCommand:
    _require_token(params, authorizer)
    return DeleteQuestionCommand(id=_require_id(params))


def parse_delete_all(
    params: Mapping[str, str], authorizer: Authorizer
) -> DeleteAllQuestionsCommand:
    _require_token(params, authorizer)
    return DeleteAllQuestionsCommand()
