# -*- coding: utf-8 -*-
"""
Обновление теста и его публичности.
"""

from fastapi import APIRouter, Depends

from src.config.logger import configure_logger
from src.service.tests import TestService
from src.utils.exceptions import APIException, InternalServerError

from ..shared.dependencies import get_test_service
from ..shared.schemas import (SuccessResponse, TestUpdateSchema,
                              TestVisibilitySchema)

router = APIRouter()
logger = configure_logger(__name__)


@router.put("/{test_id}", response_model=SuccessResponse)
async def update_test_endpoint(
    test_id: str,
    test_data: TestUpdateSchema,
    service: TestService = Depends(get_test_service),
) -> SuccessResponse:
    """
    Перезаписать название, описание, картинку и список вопросов теста.

    Ответ успешен и тогда, когда теста с таким ID нет.
    """
    payload = test_data.model_dump(exclude_unset=True)
    logger.debug(f"Обновление теста {test_id}: {payload}")

    try:
        await service.update_test(test_id, payload)
        return SuccessResponse(is_success=True)
    except APIException:
        raise
    except Exception as e:
        logger.exception(f"Ошибка обновления теста {test_id}: {e}")
        raise InternalServerError("Failed to update test")


@router.patch("/{test_id}", response_model=SuccessResponse)
async def update_test_visibility_endpoint(
    test_id: str,
    visibility: TestVisibilitySchema,
    service: TestService = Depends(get_test_service),
) -> SuccessResponse:
    """Сделать тест публичным или скрыть его."""
    payload = visibility.model_dump(exclude_unset=True)
    logger.debug(f"Изменение публичности теста {test_id}: {payload}")

    try:
        await service.update_visibility(test_id, payload)
        return SuccessResponse(is_success=True)
    except APIException:
        raise
    except Exception as e:
        logger.exception(f"Ошибка изменения публичности теста {test_id}: {e}")
        raise InternalServerError("Failed to update test visibility")
