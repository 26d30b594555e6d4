"""Theme API: saved palettes, presets, and the generated stylesheet."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from cms.api.v1.dependencies import get_theme_registry, require_admin
from cms.application.dtos.theme import PredefinedTheme
from cms.application.services import ThemeRegistry
from cms.application.services.theme_registry import render_theme_css
from cms.core.limiter import limit_writes
from cms.schemas.theme import ThemeWriteRequest

router = APIRouter()


@router.get("", response_model=list[PredefinedTheme])
async def list_themes(
    registry: Annotated[ThemeRegistry, Depends(get_theme_registry)],
):
    return await registry.list()


@router.get("/presets", response_model=list[PredefinedTheme])
def list_presets(
    registry: Annotated[ThemeRegistry, Depends(get_theme_registry)],
):
    """Built-in palettes (always available)."""
    return registry.presets()


@router.get("/{theme_id}", response_model=PredefinedTheme)
async def get_theme(
    theme_id: str,
    registry: Annotated[ThemeRegistry, Depends(get_theme_registry)],
):
    return await registry.get(theme_id)


@router.get("/{theme_id}/stylesheet")
async def get_theme_stylesheet(
    theme_id: str,
    registry: Annotated[ThemeRegistry, Depends(get_theme_registry)],
) -> Response:
    """The runtime style block contents for a saved theme or preset."""
    theme = await registry.get(theme_id)
    return Response(content=render_theme_css(theme.colors), media_type="text/css")


@router.post(
    "",
    response_model=PredefinedTheme,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
@limit_writes
async def create_theme(
    request: Request,
    body: ThemeWriteRequest,
    registry: Annotated[ThemeRegistry, Depends(get_theme_registry)],
):
    return await registry.save(body.name, body.colors)


@router.put(
    "/{theme_id}",
    response_model=PredefinedTheme,
    dependencies=[Depends(require_admin)],
)
@limit_writes
async def update_theme(
    request: Request,
    theme_id: str,
    body: ThemeWriteRequest,
    registry: Annotated[ThemeRegistry, Depends(get_theme_registry)],
):
    """Replace the theme document wholesale."""
    theme = PredefinedTheme(id=theme_id, name=body.name, colors=body.colors)
    return await registry.update(theme)


@router.delete(
    "/{theme_id}",
    status_code=204,
    dependencies=[Depends(require_admin)],
)
@limit_writes
async def delete_theme(
    request: Request,
    theme_id: str,
    registry: Annotated[ThemeRegistry, Depends(get_theme_registry)],
) -> Response:
    await registry.delete(theme_id)
    return Response(status_code=204)
