# -*- coding: utf-8 -*-
"""
reprova/domain/enums.py
~~~~~~~~~~~~~~~~~~~~~~~
Определение классов перечислений для домена Reprova.
"""

import enum


class Difficulty(str, enum.Enum):
    """Уровни сложности вопроса."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
