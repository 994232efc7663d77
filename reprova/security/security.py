# -*- coding: utf-8 -*-
"""security.security
~~~~~~~~~~~~~~~~~~~~
Проверка токена доступа.

Ключевые моменты
================
* Маршруты не знают, как устроена авторизация: они получают объект
  **Authorizer** и спрашивают только ``is_authorized(token)``.
* **StaticTokenAuthorizer** сравнивает токен запроса с общим секретом из
  настроек (``REPROVA_TOKEN``). Сессий, пользователей и срока действия нет.
* Если секрет не задан, ни один запрос не считается авторизованным.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from reprova.config.logger import configure_logger
from reprova.config.settings import settings

logger = configure_logger("security")


@runtime_checkable
class Authorizer(Protocol):
    """Проверка права на закрытые операции."""

    def is_authorized(self, token: str | None) -> bool: ...


class StaticTokenAuthorizer:
    """Авторизация по единственному общему секрету."""

    def __init__(self, secret: str | None):
        if not secret:
            logger.warning(
                "Секрет REPROVA_TOKEN не задан: все запросы будут неавторизованными"
            )
        self._secret = secret or None

    def is_authorized(self, token: str | None) -> bool:
        if self._secret is None or not token:
            return False
        return secrets.compare_digest(token.encode(), self._secret.encode())


def get_authorizer() -> Authorizer:
    """Авторизатор по умолчанию, построенный из настроек."""
    return StaticTokenAuthorizer(settings.reprova_token)
