# -*- coding: utf-8 -*-
"""
reprova/api/v1/questions/resource.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Маршруты вопросов: список, получение, статистика, сохранение и удаление.

Все ошибки разрешаются здесь: клиент получает статус-код и одно из
фиксированных тел ``ok`` / ``invalid`` / ``unauthorized``.
"""

from typing import Any, Awaitable, Callable, Optional

from fastapi import APIRouter, Request, Response
from starlette import status

from reprova.config.logger import configure_logger
from reprova.repository.questions import QuestionStore
from reprova.security.security import Authorizer, get_authorizer
from reprova.utils.exceptions import (OK_BODY, APIException,
                                      InvalidRequestError, UnauthorizedError)
from reprova.utils.json_serializer import JsonSerializer

from .shared.commands import (GetQuestionCommand, parse_delete,
                              parse_delete_all, parse_read, parse_save,
                              parse_statistics)

logger = configure_logger("questions")

JSON_MEDIA_TYPE = "application/json"


class QuestionsResource:
    """Эндпоинты /questions поверх хранилища вопросов."""

    def __init__(
        self,
        serializer: JsonSerializer,
        store: QuestionStore,
        authorizer: Optional[Authorizer] = None,
    ):
        """
        Args:
            serializer: JSON сериализатор
            store: хранилище вопросов
            authorizer: проверка токена (по умолчанию общий секрет из настроек)

        Raises:
            ValueError: если serializer или store не переданы
        """
        if serializer is None:
            raise ValueError("serializer mustn't be None")
        if store is None:
            raise ValueError("store mustn't be None")

        self.serializer = serializer
        self.store = store
        self.authorizer = authorizer if authorizer is not None else get_authorizer()

    @property
    def router(self) -> APIRouter:
        """Роутер с установленными эндпоинтами."""
        router = APIRouter(tags=["❓ Вопросы"])
        router.add_api_route("/questions", self.get, methods=["GET"])
        router.add_api_route(
            "/questions/statistics", self.get_statistics, methods=["GET"]
        )
        router.add_api_route("/questions", self.post, methods=["POST"])
        router.add_api_route("/questions", self.delete, methods=["DELETE"])
        router.add_api_route(
            "/questions/deleteAll", self.delete_all, methods=["DELETE"]
        )
        logger.info("Setup /questions.")
        return router

    # ------------------------------------------------------------------
    # Эндпоинты
    # ------------------------------------------------------------------

    async def get(self, request: Request) -> Response:
        """
        Список всех вопросов или один вопрос, если передан параметр ``id``.

        Без авторизации в списке только публичные вопросы, а приватный вопрос
        по ID отдается с 403.
        """
        logger.info("Получен запрос get questions")
        return await self._handle(self._get, request)

    async def get_statistics(self, request: Request) -> Response:
        """Статистика вопроса, с теми же правилами доступа, что и у вопроса."""
        logger.info("Получен запрос get statistics")
        return await self._handle(self._get_statistics, request)

    async def post(self, request: Request) -> Response:
        """
        Добавить или обновить вопрос, переданный в теле запроса.

        Вопрос с полем ``id`` обновляется, без него создается. Только для
        авторизованных запросов.
        """
        logger.info("Получен запрос post questions")
        return await self._handle(self._post, request)

    async def delete(self, request: Request) -> Response:
        """Удалить вопрос по параметру ``id``. Только для авторизованных запросов."""
        logger.info("Получен запрос delete questions")
        return await self._handle(self._delete, request)

    async def delete_all(self, request: Request) -> Response:
        """
        Удалить все вопросы. Только для авторизованных запросов.

        Вопросы удаляются по одному, на первой ошибке удаление прекращается.
        Уже удаленные вопросы не восстанавливаются. Пустое хранилище дает 400.
        """
        logger.info("Получен запрос delete all questions")
        return await self._handle(self._delete_all, request)

    # ------------------------------------------------------------------
    # Обработчики
    # ------------------------------------------------------------------

    async def _get(self, request: Request) -> Response:
        command = parse_read(request.query_params, self.authorizer)

        if isinstance(command, GetQuestionCommand):
            question = await self._fetch_visible(command)
            logger.info("Готово. Отправляем ответ...")
            return self._render(status.HTTP_200_OK, question)

        logger.info("Получение списка вопросов")
        # Фильтрация по теме в этом эндпоинте не поддерживается
        questions = await self.store.list(
            theme=None, pvt=None if command.authorized else False
        )
        logger.info("Готово. Отправляем ответ...")
        return self._render(status.HTTP_200_OK, questions)

    async def _get_statistics(self, request: Request) -> Response:
        command = parse_statistics(request.query_params, self.authorizer)
        question = await self._fetch_visible(command)
        logger.info("Готово. Отправляем ответ...")
        return self._render(status.HTTP_200_OK, question.statistics)

    async def _post(self, request: Request) -> Response:
        body = await request.body()
        command = parse_save(request.query_params, body, self.authorizer, self.serializer)

        question = command.question
        action = "Обновление" if question.persisted else "Добавление"
        logger.info(f"{action} вопроса: {question!r}")

        success = await self.store.add(question)
        if not success:
            logger.warning("Хранилище отклонило вопрос")

        logger.info("Готово. Отправляем ответ...")
        return self._outcome(success)

    async def _delete(self, request: Request) -> Response:
        command = parse_delete(request.query_params, self.authorizer)

        logger.info(f"Удаление вопроса {command.id}")
        success = await self.store.remove(command.id)

        logger.info("Готово. Отправляем ответ...")
        return self._outcome(success)

    async def _delete_all(self, request: Request) -> Response:
        parse_delete_all(request.query_params, self.authorizer)

        logger.info("Удаление всех вопросов")
        success = False
        for question in await self.store.list(theme=None, pvt=None):
            logger.info(f"Удаление вопроса {question.id}")
            success = await self.store.remove(question.id)
            if not success:
                logger.warning(f"Не удалось удалить вопрос {question.id}, остановка")
                break

        logger.info("Готово. Отправляем ответ...")
        return self._outcome(success)

    # ------------------------------------------------------------------
    # Вспомогательные методы
    # ------------------------------------------------------------------

    async def _fetch_visible(self, command: GetQuestionCommand):
        logger.info(f"Получение вопроса {command.id}")
        question = await self.store.get(command.id)

        if question is None:
            raise InvalidRequestError(f"Вопрос {command.id} не найден")

        if question.pvt and not command.authorized:
            raise UnauthorizedError(f"Вопрос {command.id} приватный")

        return question

    async def _handle(
        self, handler: Callable[[Request], Awaitable[Response]], request: Request
    ) -> Response:
        try:
            return await handler(request)
        except APIException as e:
            if isinstance(e, UnauthorizedError):
                logger.info(f"Доступ запрещен: {e.detail}")
            else:
                logger.error(f"Некорректный запрос: {e.detail}")
            return self._render(e.status_code, e.body)

    def _outcome(self, success: bool) -> Response:
        # Тело одинаково, успех передается только статус-кодом
        code = status.HTTP_200_OK if success else status.HTTP_400_BAD_REQUEST
        return self._render(code, OK_BODY)

    def _render(self, status_code: int, value: Any) -> Response:
        return Response(
            content=self.serializer.render(value),
            status_code=status_code,
            media_type=JSON_MEDIA_TYPE,
        )
