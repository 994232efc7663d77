# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных.
"""
from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)
from sqlalchemy.pool import StaticPool

from reprova.config.settings import settings
from reprova.domain.models import Base


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Создает асинхронный движок для указанного URL.

    SQLite в памяти живет, пока жива единственная связь, поэтому для него
    используется StaticPool.
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=echo)
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,  # Проверяем соединение перед использованием
        pool_recycle=3600,  # Переподключаемся каждый час
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Создает фабрику асинхронных сессий."""
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async_engine = build_engine(settings.database_url, echo=settings.database_echo)

AsyncSessionLocal = build_session_factory(async_engine)


async def init_db(engine: AsyncEngine = async_engine) -> None:
    """
    Инициализирует базу данных, создавая все определенные таблицы.

    Raises:
        SQLAlchemyError: Ошибки при создании таблиц
        OperationalError: Ошибки подключения к базе данных
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
