# -*- coding: utf-8 -*-
"""
Общие фикстуры для тестирования
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient

from reprova.clients.database_client import (build_engine,
                                             build_session_factory, init_db)
from reprova.main import create_app
from reprova.repository.questions import SQLQuestionStore
from reprova.security.security import StaticTokenAuthorizer
from reprova.utils.json_serializer import JsonSerializer
from tests.fixtures import TEST_TOKEN

# Тестовая база данных в памяти
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Создать тестовый движок БД с таблицами."""
    engine = build_engine(TEST_DATABASE_URL)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    """Фабрика сессий тестовой БД."""
    return build_session_factory(test_engine)


@pytest.fixture
def store(session_factory):
    """Хранилище вопросов поверх тестовой БД."""
    return SQLQuestionStore(session_factory)


@pytest.fixture
def authorizer():
    return StaticTokenAuthorizer(TEST_TOKEN)


@pytest.fixture
def serializer():
    return JsonSerializer()


@pytest.fixture
def app(store, authorizer, test_engine):
    """Приложение, собранное на тестовом хранилище."""
    return create_app(store=store, authorizer=authorizer, engine=test_engine)


@pytest.fixture
async def async_client(app):
    """Создать асинхронный тестовый клиент для API."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        yield client
