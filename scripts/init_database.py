#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Скрипт инициализации базы данных.

Выполняет:
1. Применение миграций
2. Загрузку вопросов из JSON файла (если передан путь)

Использование: ``python scripts/init_database.py [questions.json]``
"""

import asyncio
import subprocess
import sys
from pathlib import Path
from typing import List

from reprova.clients.database_client import AsyncSessionLocal
from reprova.config.logger import configure_logger
from reprova.domain.question import Question
from reprova.repository.questions import SQLQuestionStore
from reprova.utils.json_serializer import JsonSerializer

logger = configure_logger("init_database")

PROJECT_DIR = Path(__file__).resolve().parent.parent


def apply_migrations() -> None:
    result = subprocess.run(
        ["alembic", "-c", "alembic.ini", "upgrade", "head"],
        capture_output=True,
        text=True,
        cwd=PROJECT_DIR,
    )
    if result.returncode != 0:
        logger.error(f"Ошибка при применении миграций: {result.stderr}")
        logger.error(f"stdout: {result.stdout}")
        sys.exit(1)


async def load_questions(path: Path) -> int:
    """Загрузить вопросы из файла, вернуть количество добавленных."""
    questions = JsonSerializer().parse(path.read_text(encoding="utf-8"), List[Question])
    store = SQLQuestionStore(AsyncSessionLocal)

    added = 0
    for question in questions:
        if await store.add(question):
            added += 1
        else:
            logger.warning(f"Вопрос не добавлен: {question.theme} / {question.description}")
    return added


async def init_database(seed: Path | None = None):
    """Инициализация базы данных и загрузка вопросов."""
    logger.info("🚀 Начинаем инициализацию базы данных...")

    logger.info("🔄 Применение миграций...")
    apply_migrations()
    logger.info("✅ Миграции применены успешно")

    if seed is not None:
        logger.info(f"📥 Загрузка вопросов из {seed}...")
        added = await load_questions(seed)
        logger.info(f"✅ Загружено вопросов: {added}")

    logger.info("🎉 Инициализация базы данных завершена успешно!")


if __name__ == "__main__":
    seed_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    asyncio.run(init_database(seed_path))
