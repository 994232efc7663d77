# -*- coding: utf-8 -*-
"""
reprova/domain/question.py
~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic модели вопроса и его статистики.

Вопрос без ``id`` еще не сохранен. Поле ``record`` хранит оценки студентов по
семестрам (``"2019/1" -> {"student": 87.5}``), статистика вычисляется из него
и никогда не принимается от клиента.
"""

import re
import statistics as stats
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from reprova.domain.enums import Difficulty

SEMESTER_PATTERN = re.compile(r"^\d{4}/[12]$")

MIN_GRADE = 0.0
MAX_GRADE = 100.0

# Верхняя граница столбца INTEGER
MAX_ESTIMATED_TIME = 2**31 - 1


class QuestionStatistics(BaseModel):
    """Агрегированная статистика оценок по вопросу."""

    count: int = 0
    average: Optional[float] = None
    median: Optional[float] = None
    standard_deviation: Optional[float] = None
    semesters: Dict[str, float] = Field(
        default_factory=dict, description="Средняя оценка по каждому семестру"
    )

    @classmethod
    def from_record(cls, record: Dict[str, Dict[str, float]]) -> "QuestionStatistics":
        """Посчитать статистику по всем оценкам всех семестров."""
        grades: List[float] = []
        semesters: Dict[str, float] = {}
        for semester in sorted(record):
            semester_grades = list(record[semester].values())
            if not semester_grades:
                continue
            semesters[semester] = stats.fmean(semester_grades)
            grades.extend(semester_grades)

        if not grades:
            return cls()

        return cls(
            count=len(grades),
            average=stats.fmean(grades),
            median=float(stats.median(grades)),
            standard_deviation=stats.pstdev(grades),
            semesters=semesters,
        )


class Question(BaseModel):
    """Вопрос экзамена."""

    id: Optional[str] = None
    theme: str
    description: str
    statement: Optional[str] = None
    record: Dict[str, Dict[str, float]] = Field(default_factory=dict)
    pvt: bool = True
    estimated_time: Optional[int] = Field(
        default=None,
        gt=0,
        le=MAX_ESTIMATED_TIME,
        description="Ожидаемое время решения в минутах",
    )
    difficulty: Optional[Difficulty] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "theme": "Algorithms",
                "description": "Sorting",
                "statement": "Prove that merge sort runs in O(n log n).",
                "record": {"2019/1": {"alice": 85.0, "bob": 70.0}},
                "pvt": False,
                "estimated_time": 20,
                "difficulty": "medium",
            }
        }

    @field_validator("id")
    @classmethod
    def _blank_id_is_new(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("theme", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("не может быть пустым")
        return value

    @field_validator("record")
    @classmethod
    def _valid_record(
        cls, value: Dict[str, Dict[str, float]]
    ) -> Dict[str, Dict[str, float]]:
        for semester, grades in value.items():
            if not SEMESTER_PATTERN.match(semester):
                raise ValueError(
                    f"семестр '{semester}' должен иметь формат ГГГГ/1 или ГГГГ/2"
                )
            for student, grade in grades.items():
                if not MIN_GRADE <= grade <= MAX_GRADE:
                    raise ValueError(
                        f"оценка {grade} студента '{student}' вне диапазона "
                        f"[{MIN_GRADE}, {MAX_GRADE}]"
                    )
        return value

    @property
    def persisted(self) -> bool:
        return self.id is not None

    @property
    def statistics(self) -> QuestionStatistics:
        """Статистика оценок, вычисляется из ``record``."""
        return QuestionStatistics.from_record(self.record)
