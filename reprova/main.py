# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения Reprova.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from reprova import __version__
from reprova.api.v1.questions import QuestionsResource
from reprova.clients.database_client import (async_engine,
                                             build_session_factory, init_db)
from reprova.config.logger import configure_logger
from reprova.config.settings import settings
from reprova.config.uvicorn_config import setup_uvicorn_logging
from reprova.repository.questions import QuestionStore, SQLQuestionStore
from reprova.security.security import Authorizer
from reprova.utils.json_serializer import JsonSerializer

logger = configure_logger()

API_PREFIX = "/api"


def create_app(
    store: Optional[QuestionStore] = None,
    authorizer: Optional[Authorizer] = None,
    serializer: Optional[JsonSerializer] = None,
    engine: Optional[AsyncEngine] = None,
) -> FastAPI:
    """
    Собрать приложение.

    Без аргументов используется база данных и токен из настроек. В тестах
    можно передать собственное хранилище, авторизатор или движок.
    """
    engine = engine if engine is not None else async_engine
    if store is None:
        store = SQLQuestionStore(build_session_factory(engine))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_uvicorn_logging()
        logger.info(f"🔧 Конфигурация: {settings.get_config_source()}")
        await init_db(engine)
        logger.info("✅ База данных готова")
        yield
        await engine.dispose()
        logger.info("🛑 Завершение работы Reprova API")

    app = FastAPI(
        title="Reprova API",
        description="API банка вопросов для экзаменов",
        version=__version__,
        docs_url=f"{API_PREFIX}/docs",
        redoc_url=f"{API_PREFIX}/redoc",
        openapi_url=f"{API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.get_cors_methods(),
        allow_headers=settings.get_cors_headers(),
    )

    @app.middleware("http")
    async def log_all_requests(request: Request, call_next):
        if not request.url.path.startswith(API_PREFIX):
            return await call_next(request)

        logger.info(f"🌐 API запрос: {request.method} {request.url.path}")
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"💥 Критическая ошибка API: {request.method} {request.url.path}"
            )
            raise

        if response.status_code >= 400:
            logger.warning(
                f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
            )
        else:
            logger.info(
                f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
            )
        return response

    resource = QuestionsResource(
        serializer=serializer if serializer is not None else JsonSerializer(),
        store=store,
        authorizer=authorizer,
    )
    app.include_router(resource.router, prefix=API_PREFIX)

    @app.get(API_PREFIX)
    async def api_root():
        """Корневой эндпоинт API."""
        return {"message": "Reprova API работает", "version": app.version}

    @app.get(f"{API_PREFIX}/health")
    async def api_health():
        """Проверка живости приложения."""
        return {"status": "ok"}

    return app


app = create_app()
