"""System settings API: getSystemSettings / updateSystemSettings."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request

from cms.api.v1.dependencies import get_settings_aggregator, require_admin
from cms.api.v1.endpoints._responses import operation_result_response
from cms.application.dtos.settings import SystemSettings
from cms.application.services import SettingsAggregator
from cms.core.limiter import limit_writes
from cms.schemas.common import OperationResultResponse

router = APIRouter()


@router.get("", response_model=SystemSettings)
async def get_system_settings(
    aggregator: Annotated[SettingsAggregator, Depends(get_settings_aggregator)],
):
    """Every setting, with compiled-in defaults for absent keys."""
    return await aggregator.get_system_settings()


@router.put(
    "",
    response_model=OperationResultResponse,
    dependencies=[Depends(require_admin)],
)
@limit_writes
async def update_system_settings(
    request: Request,
    aggregator: Annotated[SettingsAggregator, Depends(get_settings_aggregator)],
    body: Annotated[dict[str, Any], Body()],
):
    """Validate then write one content key per setting (no cross-key transaction)."""
    result = await aggregator.update_system_settings(body)
    return operation_result_response(result)
