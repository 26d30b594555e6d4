"""Environment profiles API (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from cms.api.v1.dependencies import get_environment_manager, require_admin
from cms.api.v1.endpoints._responses import operation_result_response
from cms.application.dtos.environment import EnvironmentProfiles
from cms.application.services import EnvironmentConfigManager
from cms.core.limiter import limit_writes
from cms.schemas.common import OperationResultResponse
from cms.schemas.environment import (
    EnvironmentUpdateRequest,
    SetActiveEnvironmentRequest,
)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=EnvironmentProfiles)
async def get_system_environment(
    manager: Annotated[EnvironmentConfigManager, Depends(get_environment_manager)],
):
    return await manager.get_system_environment()


@router.put("", response_model=OperationResultResponse)
@limit_writes
async def update_system_environment(
    request: Request,
    body: EnvironmentUpdateRequest,
    manager: Annotated[EnvironmentConfigManager, Depends(get_environment_manager)],
):
    """Merge the given profiles; profiles not in the body are left untouched."""
    result = await manager.write(body.profiles, body.active_environment)
    return operation_result_response(result)


@router.post("/active", response_model=OperationResultResponse)
@limit_writes
async def set_active_environment(
    request: Request,
    body: SetActiveEnvironmentRequest,
    manager: Annotated[EnvironmentConfigManager, Depends(get_environment_manager)],
):
    result = await manager.set_active(body.active_environment)
    return operation_result_response(result)


@router.get("/{profile}/export", response_class=PlainTextResponse)
async def export_environment(
    profile: str,
    manager: Annotated[EnvironmentConfigManager, Depends(get_environment_manager)],
) -> PlainTextResponse:
    """The profile as KEY=value lines, for copy-to-clipboard."""
    return PlainTextResponse(await manager.export_as_text(profile))
