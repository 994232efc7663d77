# -*- coding: utf-8 -*-
"""
Запуск сервера: ``python -m reprova``.
"""

import uvicorn

from reprova.config.settings import settings


def main() -> None:
    uvicorn.run(
        "reprova.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
