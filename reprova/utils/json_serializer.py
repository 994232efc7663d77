# -*- coding: utf-8 -*-
"""
reprova/utils/json_serializer.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Преобразование между JSON и объектами домена.
"""

import json
from functools import lru_cache
from typing import Any, Type, TypeVar

from fastapi.encoders import jsonable_encoder
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from reprova.utils.exceptions import SerializationError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


class JsonSerializer:
    """JSON сериализатор на базе pydantic."""

    def render(self, value: Any) -> str:
        """
        Сериализовать значение в JSON строку.

        Поддерживает pydantic модели, списки, словари и примитивы. Поля
        моделей с ``exclude=True`` в вывод не попадают.
        """
        return json.dumps(jsonable_encoder(value), ensure_ascii=False)

    def parse(self, text: str | bytes, shape: Type[T]) -> T:
        """
        Разобрать JSON строку в структуру ``shape``.

        Raises:
            SerializationError: если JSON некорректен или не проходит валидацию.
        """
        if not text:
            raise SerializationError("Пустое тело запроса")
        try:
            return _adapter(shape).validate_json(text)
        except PydanticValidationError as exc:
            raise SerializationError(str(exc)) from exc
