# -*- coding: utf-8 -*-
"""
reprova/repository/questions.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Хранилище вопросов.

Маршруты работают с хранилищем через протокол ``QuestionStore``.
``SQLQuestionStore`` реализует его поверх асинхронного ORM SQLAlchemy 2.0:
каждая операция открывает собственную сессию, поэтому объект хранилища можно
безопасно использовать из параллельных запросов.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Protocol

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from reprova.config.logger import configure_logger
from reprova.domain.models import QuestionModel
from reprova.domain.question import Question

logger = configure_logger("repository")

# Ошибки драйвера, которые SQLAlchemy не оборачивает (например, слишком
# большое целое для столбца INTEGER)
WRITE_ERRORS = (SQLAlchemyError, OverflowError, ValueError)


class QuestionStore(Protocol):
    """Операции хранилища, которые нужны маршрутам вопросов."""

    async def get(self, question_id: str) -> Optional[Question]: ...

    async def list(
        self, theme: Optional[str] = None, pvt: Optional[bool] = None
    ) -> List[Question]: ...

    async def add(self, question: Question) -> bool: ...

    async def remove(self, question_id: str) -> bool: ...


def new_question_id() -> str:
    """Сгенерировать новый идентификатор вопроса."""
    return uuid.uuid4().hex


def to_domain(row: QuestionModel) -> Optional[Question]:
    """Преобразовать запись БД в вопрос, None если запись некорректна."""
    try:
        return Question.model_validate(row)
    except ValidationError as e:
        logger.error(f"Некорректная запись вопроса {row.id} пропущена: {e}")
        return None


def _columns(question: Question) -> dict:
    return question.model_dump(exclude={"id"})


class SQLQuestionStore:
    """Хранилище вопросов в реляционной базе данных."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        if session_factory is None:
            raise ValueError("session_factory mustn't be None")
        self._session_factory = session_factory

    async def get(self, question_id: str) -> Optional[Question]:
        """Получить вопрос по ID, None если его нет."""
        logger.debug(f"Получение вопроса с ID: {question_id}")
        try:
            async with self._session_factory() as session:
                row = await session.get(QuestionModel, question_id)
                return to_domain(row) if row is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Ошибка получения вопроса {question_id}: {e}")
            return None

    async def list(
        self, theme: Optional[str] = None, pvt: Optional[bool] = None
    ) -> List[Question]:
        """
        Получить список вопросов.

        Args:
            theme: Только вопросы с этой темой (None - все темы)
            pvt: Только приватные (True) или публичные (False) вопросы (None - все)
        """
        logger.debug(f"Получение списка вопросов: theme={theme}, pvt={pvt}")
        stmt = select(QuestionModel)
        if theme is not None:
            stmt = stmt.where(QuestionModel.theme == theme)
        if pvt is not None:
            stmt = stmt.where(QuestionModel.pvt == pvt)
        stmt = stmt.order_by(QuestionModel.created_at, QuestionModel.id)

        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                questions = [to_domain(row) for row in result.scalars().all()]
                return [q for q in questions if q is not None]
        except SQLAlchemyError as e:
            logger.error(f"Ошибка получения списка вопросов: {e}")
            return []

    async def add(self, question: Question) -> bool:
        """
        Добавить или обновить вопрос.

        Вопрос без ID создается, ему присваивается новый ID. Вопрос с ID
        полностью заменяет существующую запись; если записи нет, возвращается
        False.
        """
        if question.id is None:
            return await self._create(question)
        return await self._replace(question)

    async def _create(self, question: Question) -> bool:
        question_id = new_question_id()
        try:
            async with self._session_factory() as session:
                session.add(QuestionModel(id=question_id, **_columns(question)))
                await session.commit()
        except WRITE_ERRORS as e:
            logger.error(f"Ошибка создания вопроса: {e}")
            return False

        question.id = question_id
        logger.info(f"Создан вопрос {question_id}")
        return True

    async def _replace(self, question: Question) -> bool:
        try:
            async with self._session_factory() as session:
                row = await session.get(QuestionModel, question.id)
                if row is None:
                    logger.warning(f"Вопрос {question.id} не найден, обновление невозможно")
                    return False
                for key, value in _columns(question).items():
                    setattr(row, key, value)
                await session.commit()
        except WRITE_ERRORS as e:
            logger.error(f"Ошибка обновления вопроса {question.id}: {e}")
            return False

        logger.info(f"Обновлен вопрос {question.id}")
        return True

    async def remove(self, question_id: str) -> bool:
        """Удалить вопрос. False, если вопроса нет."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    delete(QuestionModel).where(QuestionModel.id == question_id)
                )
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Ошибка удаления вопроса {question_id}: {e}")
            return False

        if result.rowcount < 1:
            logger.warning(f"Вопрос {question_id} не найден, удаление невозможно")
            return False

        logger.info(f"Удален вопрос {question_id}")
        return True
