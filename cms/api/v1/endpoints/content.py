"""Content API: resolved reads for pages, inline edit saves, admin content page."""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, Request, Response

from cms.api.v1.dependencies import (
    get_content_admin_service,
    get_content_store,
    get_editable_context,
    get_translator,
    require_admin,
)
from cms.application.interfaces.repositories import IContentStore
from cms.application.interfaces.services import ITranslationService
from cms.application.services import (
    ContentAdminService,
    EditableContext,
    EditableFieldController,
)
from cms.core.limiter import limit_writes
from cms.domain.exceptions import ContentStoreException, ResourceNotFoundException
from cms.domain.fallback import resolve
from cms.schemas.content import (
    ContentEntryResponse,
    InlineSaveRequest,
    InlineSaveResponse,
    RawContentResponse,
    RawSaveRequest,
    ResolvedContentResponse,
    raw_or_none,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[ContentEntryResponse],
    dependencies=[Depends(require_admin)],
)
async def list_content(
    service: Annotated[ContentAdminService, Depends(get_content_admin_service)],
    search: Annotated[str | None, Query(max_length=200)] = None,
):
    """List every stored key sorted by id, optionally filtered by substring."""
    entries = await service.list_entries(search)
    return [ContentEntryResponse.from_value(e.id, e.value) for e in entries]


@router.get("/{content_id}", response_model=ResolvedContentResponse)
async def get_content(
    content_id: str,
    context: Annotated[EditableContext, Depends(get_editable_context)],
    lang: Literal["es", "en"] = "es",
    fallback: Annotated[str, Query(max_length=10_000)] = "",
):
    """Return the display text for lang (requested -> es -> fallback)."""
    value = await context.fetch(content_id)
    return ResolvedContentResponse(
        id=content_id,
        lang=lang,
        text=resolve(lang, value, fallback),
        value=raw_or_none(value),
    )


@router.get("/{content_id}/raw", response_model=RawContentResponse)
async def get_raw_content(
    content_id: str,
    store: Annotated[IContentStore, Depends(get_content_store)],
):
    value = await store.get(content_id)
    if value is None:
        raise ResourceNotFoundException("content", content_id)
    return RawContentResponse(id=content_id, value=value.to_raw())


@router.put("/{content_id}", response_model=InlineSaveResponse)
@limit_writes
async def save_inline(
    request: Request,
    content_id: str,
    body: InlineSaveRequest,
    context: Annotated[EditableContext, Depends(get_editable_context)],
    translator: Annotated[ITranslationService, Depends(get_translator)],
):
    """Save an inline edit: write body.lang, translate the other language, merge.

    A translation failure still saves the edited language (translated=false).
    """
    controller = EditableFieldController(
        context, translator, content_id, fallback="", lang=body.lang
    )
    await controller.mount()
    controller.begin_edit()
    outcome = await controller.save(body.text)
    if not outcome.persisted:
        raise ContentStoreException("write", content_id, "store write failed")
    return InlineSaveResponse(
        id=outcome.content_id,
        lang=outcome.lang,
        value=outcome.value.to_raw(),
        display=outcome.display,
        translated=outcome.translated,
    )


@router.put(
    "/{content_id}/value",
    response_model=RawContentResponse,
    dependencies=[Depends(require_admin)],
)
@limit_writes
async def save_raw_content(
    request: Request,
    content_id: str,
    body: RawSaveRequest,
    service: Annotated[ContentAdminService, Depends(get_content_admin_service)],
):
    """Overwrite the stored value; a bare string is saved in both languages."""
    value = await service.save_raw(content_id, body.value)
    return RawContentResponse(id=content_id, value=value.to_raw())


@router.delete(
    "/{content_id}",
    status_code=204,
    dependencies=[Depends(require_admin)],
)
@limit_writes
async def delete_content(
    request: Request,
    content_id: str,
    service: Annotated[ContentAdminService, Depends(get_content_admin_service)],
) -> Response:
    await service.delete(content_id)
    return Response(status_code=204)
