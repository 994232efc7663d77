# -*- coding: utf-8 -*-
"""
Настройка логирования для Reprova с использованием loguru.
"""
import logging
import sys

from loguru import logger

from reprova.config.settings import settings

# Удаляем стандартный хендлер loguru
logger.remove()

# Библиотеки, чьи INFO логи только засоряют вывод
_NOISY_LOGGERS = ("httpx", "httpcore", "aiosqlite", "asyncio")


class InterceptHandler(logging.Handler):
    """Перехватывает стандартные логи и перенаправляет их в loguru."""

    def emit(self, record):
        if record.name.startswith(_NOISY_LOGGERS) and record.levelno < logging.WARNING:
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


# Настраиваем перехват всех стандартных логов
logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

log_level = settings.log_level.upper()

# Формат для консоли (с цветами)
console_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Формат для файла (без цветов)
file_format = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

logger.add(
    sys.stdout,
    format=console_format,
    level=log_level,
    colorize=True,
    backtrace=False,
    diagnose=False,
)

if settings.log_file:
    logger.add(
        settings.log_file,
        format=file_format,
        level=log_level,
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        enqueue=True,
    )


def configure_logger(name: str = "reprova"):
    """
    Получает настроенный логгер.

    Args:
        name: Имя компонента, сохраняется в extra записи

    Returns:
        loguru.Logger: Настроенный логгер
    """
    return logger.bind(component=name)
