# -*- coding: utf-8 -*-
"""
Конфигурация для Uvicorn: логи сервера идут через loguru.
"""

import logging

from reprova.config.logger import InterceptHandler


def setup_uvicorn_logging():
    """Настраивает перехват логов uvicorn, fastapi и sqlalchemy."""

    for logger_name in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "fastapi",
        "sqlalchemy.engine",
        "sqlalchemy.pool",
    ]:
        logger_obj = logging.getLogger(logger_name)
        logger_obj.handlers = [InterceptHandler()]
        logger_obj.propagate = False

    # Запросы логирует middleware приложения
    logging.getLogger("uvicorn.access").disabled = True

    # SQLAlchemy только предупреждения и ошибки
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
