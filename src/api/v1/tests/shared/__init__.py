"""
Shared components for tests.

This module contains shared schemas, formatting utilities and dependencies
used by the test endpoints.
"""

from .dependencies import get_test_service
from .schemas import (QuestionKeySchema, QuestionReadSchema, ResultReadSchema,
                      SuccessResponse, TestCreateSchema, TestDetailSchema,
                      TestListResponse, TestSummarySchema, TestUpdateSchema,
                      TestVisibilitySchema, TestWithResultResponse,
                      WordReadSchema)
from .utils import (format_question, format_result, format_results,
                    format_test_detail, format_test_summary,
                    format_tests_summary)

__all__ = [
    # Schemas
    "TestCreateSchema",
    "TestUpdateSchema",
    "TestVisibilitySchema",
    "TestSummarySchema",
    "TestDetailSchema",
    "TestListResponse",
    "TestWithResultResponse",
    "QuestionKeySchema",
    "QuestionReadSchema",
    "WordReadSchema",
    "ResultReadSchema",
    "SuccessResponse",
    # Utils
    "format_question",
    "format_result",
    "format_results",
    "format_test_summary",
    "format_tests_summary",
    "format_test_detail",
    # Dependencies
    "get_test_service",
]
