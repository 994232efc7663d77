# -*- coding: utf-8 -*-
"""
Reprova: API банка вопросов для экзаменов.
"""

__version__ = "0.1.0"
