# -*- coding: utf-8 -*-
"""
reprova/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~
ORM модели SQLAlchemy 2.0 для хранения вопросов.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from reprova.domain.enums import Difficulty


class Base(DeclarativeBase):
    """Базовый класс для всех ORM моделей."""


class QuestionModel(Base):
    """Таблица вопросов."""

    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    theme: Mapped[str] = mapped_column(String(255), index=True)
    description: Mapped[str] = mapped_column(Text)
    statement: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # {"2019/1": {"student": 87.5, ...}, ...}
    record: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    pvt: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
    estimated_time: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    difficulty: Mapped[Optional[Difficulty]] = mapped_column(
        Enum(
            Difficulty,
            name="difficulty",
            values_callable=lambda e: [item.value for item in e],
        ),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<QuestionModel id={self.id} theme={self.theme!r} pvt={self.pvt}>"
