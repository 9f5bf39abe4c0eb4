# -*- coding: utf-8 -*-
"""
QuizService/src/repository/questions/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Репозиторий для работы с вопросами.
"""

from .crud import (count_existing_questions, create_question,
                   delete_questions, get_questions_with_words)

__all__ = [
    "create_question",
    "count_existing_questions",
    "get_questions_with_words",
    "delete_questions",
]
