# -*- coding: utf-8 -*-
"""
reprova/api/v1/questions/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Эндпоинты вопросов.
"""

from .resource import QuestionsResource

__all__ = ["QuestionsResource"]
