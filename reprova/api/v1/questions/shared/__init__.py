# -*- coding: utf-8 -*-
"""
reprova/api/v1/questions/shared/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие компоненты для работы с вопросами.
"""

from .commands import (DeleteAllQuestionsCommand, DeleteQuestionCommand,
                       GetQuestionCommand, GetStatisticsCommand,
                       ListQuestionsCommand, SaveQuestionCommand,
                       parse_delete, parse_delete_all, parse_read,
                       parse_save, parse_statistics)

__all__ = [
    "ListQuestionsCommand",
    "GetQuestionCommand",
    "GetStatisticsCommand",
    "SaveQuestionCommand",
    "DeleteQuestionCommand",
    "DeleteAllQuestionsCommand",
    "parse_read",
    "parse_statistics",
    "parse_save",
    "parse_delete",
    "parse_delete_all",
]
