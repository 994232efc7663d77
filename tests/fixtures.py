# -*- coding: utf-8 -*-
"""
Фикстуры для тестирования вопросов
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from reprova.domain.models import QuestionModel

TEST_TOKEN = "test-token"


def question_payload(**overrides: Any) -> Dict[str, Any]:
    """Тело запроса с корректным вопросом"""
    payload = {
        "theme": "Algorithms",
        "description": "Sorting",
        "statement": "Prove that merge sort runs in O(n log n).",
        "record": {"2019/1": {"alice": 80.0, "bob": 60.0}},
        "pvt": False,
        "estimated_time": 20,
        "difficulty": "medium",
    }
    payload.update(overrides)
    return payload


async def insert_question(
    session_factory: async_sessionmaker[AsyncSession],
    question_id: str,
    pvt: bool = False,
    theme: str = "Algorithms",
    record: Optional[Dict[str, Dict[str, float]]] = None,
) -> QuestionModel:
    """Создать вопрос напрямую в БД с заданным ID"""
    row = QuestionModel(
        id=question_id,
        theme=theme,
        description=f"Question {question_id}",
        statement=None,
        record=record or {},
        pvt=pvt,
    )
    async with session_factory() as session:
        session.add(row)
        await session.commit()
    return row


async def insert_questions(
    session_factory: async_sessionmaker[AsyncSession], count: int, pvt: bool = False
) -> List[QuestionModel]:
    """Создать несколько вопросов"""
    return [
        await insert_question(session_factory, f"q{i}", pvt=pvt) for i in range(count)
    ]


async def count_questions(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """Количество вопросов в БД"""
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(QuestionModel))
        return result.scalar_one()
